"""Tests for the FastAPI dev server."""

import json

from fastapi.testclient import TestClient

from docindex.core.index import build_index, serialize_index
from docindex.web.app import DOCS_ENDPOINT, create_app


class TestDocsEndpoint:
    """Tests for GET /api/docs."""

    def test_returns_index(self, docs_root) -> None:
        index = build_index(docs_root)
        client = TestClient(create_app(index))
        response = client.get(DOCS_ENDPOINT)
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == json.loads(serialize_index(index))

    def test_cors_header_with_origin(self, sample_index) -> None:
        client = TestClient(create_app(sample_index))
        response = client.get(DOCS_ENDPOINT, headers={"Origin": "http://localhost:3000"})
        assert response.headers["access-control-allow-origin"] == "*"

    def test_missing_index_returns_500(self) -> None:
        client = TestClient(create_app(None))
        response = client.get(DOCS_ENDPOINT)
        assert response.status_code == 500
        assert response.json() == {"error": "Documentation not loaded"}

    def test_other_paths_not_found(self, sample_index) -> None:
        client = TestClient(create_app(sample_index))
        assert client.get("/api/other").status_code == 404

    def test_post_not_allowed(self, sample_index) -> None:
        client = TestClient(create_app(sample_index))
        assert client.post(DOCS_ENDPOINT).status_code == 405
