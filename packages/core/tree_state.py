from __future__ import annotations

import logging
import secrets
import threading
from collections import OrderedDict
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class TreeStateStore:
    """Expanded/collapsed flags for sidebar folders, keyed by full path.

    Every folder starts collapsed, including paths the store has never seen.
    Flags are independent: toggling a folder never changes its ancestors or
    descendants.
    """

    def __init__(self) -> None:
        self._expanded: set[str] = set()

    def is_expanded(self, full_path: str) -> bool:
        return full_path in self._expanded

    def toggle(self, full_path: str) -> bool:
        """Flip one folder and return its new state."""
        if full_path in self._expanded:
            self._expanded.discard(full_path)
            return False
        self._expanded.add(full_path)
        return True

    @property
    def expanded(self) -> frozenset[str]:
        return frozenset(self._expanded)


@dataclass
class NavSession:
    id: str
    store: TreeStateStore
    created: bool = False


class NavSessionRegistry:
    """In-memory map of browser session id -> its own TreeStateStore."""

    def __init__(self, max_sessions: int = 1024):
        self.max_sessions = max(1, max_sessions)
        self._stores: OrderedDict[str, TreeStateStore] = OrderedDict()
        self._lock = threading.Lock()

    def resolve(self, session_id: str | None) -> NavSession:
        """Return the store for ``session_id``, starting a new session if unknown."""
        with self._lock:
            if session_id and session_id in self._stores:
                self._stores.move_to_end(session_id)
                return NavSession(id=session_id, store=self._stores[session_id])
            new_id = secrets.token_urlsafe(16)
            store = TreeStateStore()
            self._stores[new_id] = store
            while len(self._stores) > self.max_sessions:
                evicted, _ = self._stores.popitem(last=False)
                logger.debug("Dropped nav session %s (limit %s)", evicted, self.max_sessions)
            return NavSession(id=new_id, store=store, created=True)

    def __len__(self) -> int:
        with self._lock:
            return len(self._stores)

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            return session_id in self._stores


__all__ = ["TreeStateStore", "NavSession", "NavSessionRegistry"]
