"""Substring search with context snippets and title-first ranking over a DocIndex"""

from docindex.core.models import DocIndex, Document, SearchMatch, SearchResult


CONTEXT_CHARS = 50
MAX_MATCHES_PER_TERM = 3
MAX_RESULTS = 20


def tokenize(query: str) -> list[str]:
    """Lowercased whitespace-separated query terms."""
    return query.lower().split()


def searchable_text(doc: Document) -> str:
    """Title plus rendered HTML (tags included), lowercased."""
    return f"{doc.title} {doc.content}".lower()


def find_snippets(text: str, term: str, limit: int = MAX_MATCHES_PER_TERM) -> list[SearchMatch]:
    """Scan text for term and return up to limit non-overlapping snippets.

    Each snippet carries at most CONTEXT_CHARS characters either side of the
    hit without crossing a line break; scanning resumes after the end of the
    previous snippet.
    """
    matches: list[SearchMatch] = []
    floor = 0
    while len(matches) < limit:
        hit = text.find(term, floor)
        if hit == -1:
            break
        end = hit + len(term)
        line_start = text.rfind("\n", 0, hit) + 1
        line_end = text.find("\n", end)
        if line_end == -1:
            line_end = len(text)
        start = max(floor, line_start, hit - CONTEXT_CHARS)
        stop = min(line_end, end + CONTEXT_CHARS)
        matches.append(SearchMatch(text=text[start:stop], highlight=text[hit:end]))
        floor = stop
    return matches


def _in_title(doc: Document, terms: list[str]) -> bool:
    title = doc.title.lower()
    return any(term in title for term in terms)


def search_index(index: DocIndex, query: str, limit: int = MAX_RESULTS) -> list[SearchResult]:
    """Return documents containing every query term, title hits first, then by match count."""
    terms = tokenize(query)
    if not terms:
        return []

    results: list[SearchResult] = []
    for doc in index.files:
        text = searchable_text(doc)
        if not all(term in text for term in terms):
            continue
        matches = [m for term in terms for m in find_snippets(text, term)]
        results.append(SearchResult(file=doc, matches=matches))

    results.sort(key=lambda r: (not _in_title(r.file, terms), -len(r.matches)))
    return results[:limit]


def get_by_slug(index: DocIndex, slug: str) -> Document | None:
    return next((f for f in index.files if f.slug == slug), None)


def get_by_category(index: DocIndex, category: str) -> list[Document]:
    return [f for f in index.files if f.category == category]
