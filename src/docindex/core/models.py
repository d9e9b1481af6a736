"""Documentation index data models shared by the builder, the endpoint and the client"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Document(BaseModel):
    """A rendered markdown file. Identity is its root-relative path."""
    model_config = ConfigDict(populate_by_name=True)

    path:          str
    title:         str
    slug:          str
    category:      str
    content:       str                      # rendered HTML
    frontmatter:   dict[str, Any] = {}
    last_modified: datetime = Field(alias="lastModified")


class DocIndex(BaseModel):
    """All documents from one build plus their sorted unique categories."""
    files:      list[Document] = []
    categories: list[str] = []

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready dict served by the endpoint and written to the static asset."""
        return self.model_dump(mode="json", by_alias=True)


class SearchMatch(BaseModel):
    text:      str
    highlight: str


class SearchResult(BaseModel):
    file:    Document
    matches: list[SearchMatch] = []
