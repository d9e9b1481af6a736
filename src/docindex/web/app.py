"""FastAPI dev server exposing the documentation index."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from docindex.core.models import DocIndex

LOGGER = logging.getLogger(__name__)

DOCS_ENDPOINT = "/api/docs"


def create_app(index: DocIndex | None) -> FastAPI:
    """Build the dev app serving a prebuilt index; a None index means the build failed."""
    app = FastAPI(title="docindex dev server", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.state.doc_index = index

    @app.get(DOCS_ENDPOINT)
    async def get_docs() -> JSONResponse:
        LOGGER.info("Serving docs API request")
        doc_index: DocIndex | None = app.state.doc_index
        if doc_index is None:
            return JSONResponse(status_code=500, content={"error": "Documentation not loaded"})
        return JSONResponse(
            content=doc_index.to_payload(),
            headers={"Access-Control-Allow-Origin": "*"},
        )

    return app
