from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_DOCS_DIR = "content/docs"


@dataclass
class SiteConfig:
    docs_dir: str
    manifest_path: str
    site_title: str | None
    nav_cookie: str
    max_nav_sessions: int


def load_site_config() -> SiteConfig:
    docs_dir = os.getenv("DOCSHELF_DOCS_DIR", DEFAULT_DOCS_DIR)
    return SiteConfig(
        docs_dir=docs_dir,
        manifest_path=os.getenv(
            "DOCSHELF_MANIFEST", os.path.join(docs_dir, "manifest.yaml")
        ),
        site_title=os.getenv("DOCSHELF_SITE_TITLE") or None,
        nav_cookie=os.getenv("DOCSHELF_NAV_COOKIE", "docshelf_nav"),
        max_nav_sessions=int(os.getenv("DOCSHELF_MAX_NAV_SESSIONS", "1024")),
    )


__all__ = ["SiteConfig", "load_site_config"]
