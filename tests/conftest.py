import os
import sys
from pathlib import Path

os.environ.setdefault("PYTEST_DISABLE_PLUGIN_AUTOLOAD", "1")
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

# Ensure project root is importable
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from packages.core import DocTree  # noqa: E402
from packages.core.manifest import build_tree  # noqa: E402

SAMPLE_MANIFEST_YAML = """\
title: Test Docs
root_files:
  - react-introduction
folders:
  - name: core
    icon: "⚙️"
    files: [decorator, guard]
  - name: ecommerce
    files: [cart, order, payment, product]
  - name: init
    folders:
      - name: env-config
        files: [README]
      - name: initial
        files: [README, setup-prisma]
      - name: empty
"""

SAMPLE_DOCS = {
    "react-introduction.md": "# React Introduction\n\nComponents all the way down.\n",
    "core/guard.md": (
        "# Guard\n\nGuards gate route handlers.\n\n"
        "## Example\n\n```python\nprint('guard')\n```\n\n"
        "## Example\n\nA second example.\n\n"
        "##### Deep note\n\nNot in the outline.\n"
    ),
    "core/decorator.md": "# Decorator\n\nMetadata on handlers.\n",
    "init/initial/README.md": "# Initial setup\n\n## Steps\n\nDo things.\n",
}


def sample_manifest() -> dict:
    import yaml

    return yaml.safe_load(SAMPLE_MANIFEST_YAML)


@pytest.fixture
def sample_tree() -> DocTree:
    return build_tree(sample_manifest())


@pytest.fixture
def docs_dir(tmp_path) -> Path:
    root = tmp_path / "docs"
    root.mkdir()
    (root / "manifest.yaml").write_text(SAMPLE_MANIFEST_YAML, encoding="utf-8")
    for rel, text in SAMPLE_DOCS.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return root


def rebind_app():
    # Reload the app module so each test gets a fresh FastAPI instance/state.
    import importlib

    api_main = importlib.reload(importlib.import_module("apps.api.main"))
    return api_main.app


@pytest.fixture(scope="function")
def test_client(docs_dir: Path, monkeypatch) -> Iterator[TestClient]:
    monkeypatch.setenv("DOCSHELF_DOCS_DIR", str(docs_dir))
    monkeypatch.delenv("DOCSHELF_MANIFEST", raising=False)
    monkeypatch.delenv("DOCSHELF_SITE_TITLE", raising=False)
    monkeypatch.delenv("DOCSHELF_NAV_COOKIE", raising=False)
    app_instance = rebind_app()
    with TestClient(app_instance) as client:
        yield client
