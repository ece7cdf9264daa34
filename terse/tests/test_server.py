"""Tests for the HTTP API."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from tersify import __version__
from tersify.server import app, run_server


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class TestServer:
    """Tests for the tersify endpoints."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": __version__}

    def test_dialect(self, client: TestClient) -> None:
        data = client.get("/api/dialect").json()
        assert data["paragraph_start"] == r"\LMHash{}"
        assert data["non_normative_tags"] == ["commentary", "rationale"]

    def test_terse(self, client: TestClient) -> None:
        text = "\\begin{document}\n\\LMHash{}\nFoo bar\nbaz.\n\n"
        response = client.post("/api/terse", json={"text": text})
        assert response.status_code == 200
        data = response.json()
        assert data["text"] == "\\begin{document}\nFoo bar baz.\n\n"
        assert data["line_count"] == 3
        assert data["input_line_count"] == 5
        assert len(data["passes"]) == 7

    def test_structural_error(self, client: TestClient) -> None:
        text = "\\begin{document}\n\\begin{itemize}\n\\end{itemize}\n"
        response = client.post("/api/terse", json={"text": text})
        assert response.status_code == 422
        assert "no items found" in response.json()["detail"]

    def test_bad_dialect(self, client: TestClient) -> None:
        response = client.post("/api/terse", json={"text": "x", "dialect": {"bogus": 1}})
        assert response.status_code == 400

    def test_mistyped_dialect(self, client: TestClient) -> None:
        response = client.post("/api/terse", json={"text": "x", "dialect": {"list_begins": 5}})
        assert response.status_code == 400
        assert "list_begins" in response.json()["detail"]

    def test_run_server(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """run_server hands the app to uvicorn."""
        calls = []
        monkeypatch.setattr(
            "uvicorn.run", lambda target, **kwargs: calls.append((target, kwargs))
        )
        run_server(port=9000)
        assert calls == [(app, {"host": "127.0.0.1", "port": 9000})]

    def test_custom_dialect(self, client: TestClient) -> None:
        response = client.post(
            "/api/terse",
            json={"text": "\\aside{x}\nkept\n", "dialect": {"non_normative_tags": ["aside"]}},
        )
        assert response.status_code == 200
        assert response.json()["text"] == "kept\n"
