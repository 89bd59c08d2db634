import pytest
from fastapi.testclient import TestClient


def test_home_page_renders_sidebar(test_client: TestClient):
    res = test_client.get("/")
    assert res.status_code == 200
    html = res.text
    assert "Test Docs" in html
    assert 'data-total="10"' in html
    assert 'href="/docs/react-introduction"' in html
    assert 'data-folder="core"' in html
    # Collapsed folders hide their files.
    assert 'href="/docs/core/guard"' not in html
    assert "docshelf_nav" in res.cookies


def test_toggle_redirects_back_and_expands(test_client: TestClient):
    res = test_client.post(
        "/nav/toggle",
        params={"path": "core", "next": "/docs/core/guard"},
        follow_redirects=False,
    )
    assert res.status_code == 303
    assert res.headers["location"] == "/docs/core/guard"

    page = test_client.get("/docs/core/guard")
    assert page.status_code == 200
    html = page.text
    assert 'href="/docs/core/guard" aria-current="page"' in html
    assert 'href="/docs/core/decorator">' in html
    assert html.count('aria-current="page"') == 1
    assert 'aria-expanded="true" data-folder="core"' in html


def test_toggle_twice_collapses_again(test_client: TestClient):
    for _ in range(2):
        test_client.post("/nav/toggle", params={"path": "core", "next": "/"})
    html = test_client.get("/").text
    assert 'aria-expanded="false" data-folder="core"' in html
    assert 'href="/docs/core/guard"' not in html


def test_nested_folder_needs_its_parent_open(test_client: TestClient):
    test_client.post("/nav/toggle", params={"path": "init/initial", "next": "/"})
    html = test_client.get("/").text
    assert 'href="/docs/init/initial/README"' not in html

    test_client.post("/nav/toggle", params={"path": "init", "next": "/"})
    html = test_client.get("/").text
    assert 'href="/docs/init/initial/README"' in html
    assert 'href="/docs/init/env-config/README"' not in html


@pytest.mark.parametrize("target", ["https://example.com/", "//example.com", "docs"])
def test_toggle_ignores_external_redirects(test_client: TestClient, target):
    res = test_client.post(
        "/nav/toggle",
        params={"path": "core", "next": target},
        follow_redirects=False,
    )
    assert res.status_code == 303
    assert res.headers["location"] == "/"


def test_document_page_shows_breadcrumbs_and_outline(test_client: TestClient):
    res = test_client.get("/docs/init/initial/README")
    assert res.status_code == 200
    html = res.text
    assert "<title>README · Test Docs</title>" in html
    assert 'class="breadcrumbs"' in html
    assert "<li>initial</li>" in html
    assert 'class="outline"' in html
    assert 'href="#steps"' in html


def test_missing_document_page_is_404(test_client: TestClient):
    res = test_client.get("/docs/core/pipe")
    assert res.status_code == 404
    assert "Document not found" in res.text
    assert 'data-total="10"' in res.text


def test_static_assets_served(test_client: TestClient):
    css = test_client.get("/static/css/site.css")
    assert css.status_code == 200
    assert ".nav-file.is-active" in css.text
    highlight = test_client.get("/assets/highlight.css")
    assert highlight.status_code == 200
    assert highlight.headers["content-type"].startswith("text/css")
    assert ".codehilite" in highlight.text


def test_openapi_docs_moved_under_api(test_client: TestClient):
    assert test_client.get("/api/openapi.json").status_code == 200


def test_non_utf8_document_page_shows_error(test_client: TestClient, docs_dir):
    (docs_dir / "core" / "guard.md").write_bytes(b"# Guard\n\xff\xfe bad\n")
    res = test_client.get("/docs/core/guard")
    assert res.status_code == 404
    assert "Document could not be read" in res.text
    assert 'data-total="10"' in res.text
