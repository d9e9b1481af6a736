"""Client-side documentation service: single-flight index loading, lookup and search.

The index is fetched at most once per service. Concurrent callers of
load_documentation share one in-flight task, and any failure to fetch or decode
the index degrades to a small built-in index instead of raising.
"""

import asyncio
import logging
from datetime import datetime, timezone

import httpx

from docindex.config import Settings
from docindex.core.models import DocIndex, Document, SearchResult
from docindex.core.search import get_by_category, get_by_slug, search_index

LOGGER = logging.getLogger(__name__)

DEV_ENDPOINT = "/api/docs"
STATIC_ASSET = "/docs-index.json"


def fallback_index() -> DocIndex:
    """Minimal index used when the real one cannot be loaded."""
    now = datetime.now(timezone.utc)
    entries = [
        ("README.md", "Project Overview", "readme",
         "<h1>Music Collaboration Platform</h1><p>This is the main project documentation...</p>"),
        ("REQUIREMENTS.md", "Project Requirements", "requirements",
         "<h1>Requirements</h1><p>Detailed project requirements...</p>"),
        ("ARCHITECTURE.md", "System Architecture", "architecture",
         "<h1>Architecture</h1><p>System architecture documentation...</p>"),
        ("PROJECT-PLAN.md", "Project Plan", "project-plan",
         "<h1>Project Plan</h1><p>Development phases and timeline...</p>"),
    ]
    files = [
        Document(path=path, title=title, slug=slug, category="root",
                 content=content, frontmatter={}, last_modified=now)
        for path, title, slug, content in entries
    ]
    return DocIndex(files=files, categories=["root"])


class DocumentationService:
    """Loads the documentation index once and answers queries against it."""

    def __init__(
        self,
        base_url: str = "",
        dev_mode: bool = False,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.dev_mode = dev_mode
        self._client = client
        self._owns_client = client is None
        self._timeout = timeout
        self._cache: DocIndex | None = None
        self._pending: asyncio.Task[DocIndex] | None = None

    @classmethod
    def from_settings(cls, settings: Settings, client: httpx.AsyncClient | None = None) -> "DocumentationService":
        return cls(settings.base_url, settings.dev_mode, client=client, timeout=settings.fetch_timeout)

    @property
    def index_url(self) -> str:
        return self.base_url + (DEV_ENDPOINT if self.dev_mode else STATIC_ASSET)

    async def __aenter__(self) -> "DocumentationService":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def _fetch(self) -> DocIndex:
        source = "dev API" if self.dev_mode else "static asset"
        LOGGER.info("Loading documentation from %s: %s", source, self.index_url)
        try:
            response = await self._http().get(self.index_url)
            response.raise_for_status()
            index = DocIndex.model_validate(response.json())
            LOGGER.info(
                "Loaded documentation: files=%d categories=%d",
                len(index.files), len(index.categories),
            )
        except (httpx.HTTPError, ValueError) as e:
            LOGGER.error("Error loading documentation, falling back to built-in index: %s", e)
            index = fallback_index()
        self._cache = index
        return index

    async def load_documentation(self) -> DocIndex:
        """Return the cached index, fetching it once if needed."""
        if self._cache is not None:
            return self._cache
        if self._pending is None:
            self._pending = asyncio.ensure_future(self._fetch())
            self._pending.add_done_callback(self._clear_pending)
        return await asyncio.shield(self._pending)

    def _clear_pending(self, task: asyncio.Task) -> None:
        if self._pending is task:
            self._pending = None

    async def get_document_by_slug(self, slug: str) -> Document | None:
        docs = await self.load_documentation()
        found = get_by_slug(docs, slug)
        LOGGER.debug("Lookup slug=%s found=%s", slug, found.title if found else None)
        return found

    async def get_documents_by_category(self, category: str) -> list[Document]:
        docs = await self.load_documentation()
        return get_by_category(docs, category)

    async def search_documents(self, query: str) -> list[SearchResult]:
        if not query.strip():
            return []
        docs = await self.load_documentation()
        return search_index(docs, query)

    async def get_categories(self) -> list[str]:
        docs = await self.load_documentation()
        return docs.categories
