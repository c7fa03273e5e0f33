"""
Unit tests for the refactoring API endpoints.
"""

import pytest

# Skip tests if fastapi is not installed
pytest.importorskip("fastapi")

from fastapi.testclient import TestClient

from flipper.main import app
from flipper.services.refactoring_service import RefactoringService, get_refactoring_service
from plugins.manager import create_default_plugin_manager


IF_ELSE_SOURCE = "if (isAdmin) {\n    doAdminStuff();\n} else {\n    youAreNotAllowed();\n}\n"


@pytest.fixture(scope="module")
def plugin_manager():
    return create_default_plugin_manager()


@pytest.fixture
def client(plugin_manager):
    """Create a test client backed by a fresh refactoring service."""
    service = RefactoringService(plugin_manager=plugin_manager, max_source_chars=1000)
    app.dependency_overrides[get_refactoring_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_propose_refactorings(client):
    """Test that edits are returned for an if/else under the cursor."""
    response = client.post("/api/refactorings", json={
        "content": IF_ELSE_SOURCE,
        "line": 1,
        "column": 4,
        "file_path": "guard.ts",
    })

    assert response.status_code == 200
    data = response.json()
    assert data["language"] == "typescript"
    assert [e["kind"] for e in data["edits"]] == [
        "simplify_if_else",
        "invert_and_simplify_if_else",
    ]

    invert = data["edits"][1]
    assert invert["title"] == "Invert and simplify if/else"
    assert invert["range"]["start"] == {"line": 0, "column": 0}
    assert invert["range"]["end"] == {"line": 4, "column": 1}
    assert invert["new_text"] == (
        "if (!isAdmin) {\n    youAreNotAllowed();\n    return;\n}\ndoAdminStuff();"
    )


def test_propose_nothing_applicable(client):
    """Test that an inapplicable cursor returns an empty edit list."""
    response = client.post("/api/refactorings", json={
        "content": "const x = 1;\n",
        "line": 0,
        "column": 6,
    })

    assert response.status_code == 200
    assert response.json() == {"language": "typescript", "edits": []}


def test_unsupported_language(client):
    """Test that an unknown language is a client error."""
    response = client.post("/api/refactorings", json={
        "content": IF_ELSE_SOURCE,
        "line": 0,
        "column": 0,
        "language": "cobol",
    })

    assert response.status_code == 400
    assert "cobol" in response.json()["detail"]


def test_source_too_large(client):
    """Test that oversized buffers are rejected."""
    response = client.post("/api/refactorings", json={
        "content": "x;\n" * 1000,
        "line": 0,
        "column": 0,
    })

    assert response.status_code == 413


def test_negative_cursor_rejected(client):
    """Test request validation of the cursor position."""
    response = client.post("/api/refactorings", json={
        "content": IF_ELSE_SOURCE,
        "line": -1,
        "column": 0,
    })

    assert response.status_code == 422


def test_list_languages(client):
    """Test listing the supported languages."""
    response = client.get("/api/refactorings/languages")

    assert response.status_code == 200
    languages = {item["name"]: item["file_extensions"] for item in response.json()}
    assert ".ts" in languages["typescript"]
    assert languages["java"] == [".java"]
