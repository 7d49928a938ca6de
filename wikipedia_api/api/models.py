"""Wire shapes returned by the MediaWiki action API."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, TypeAdapter

# opensearch answers with a positional array: [term, titles, descriptions, urls]
OpenSearchWire = tuple[str, list[str], list[str], list[str]]
OPENSEARCH_ADAPTER: TypeAdapter[OpenSearchWire] = TypeAdapter(OpenSearchWire)


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Named view over an opensearch response.

    ``titles``, ``descriptions`` and ``urls`` are parallel; index 0 is the best match.
    """

    term: str
    titles: tuple[str, ...]
    descriptions: tuple[str, ...]
    urls: tuple[str, ...]

    @classmethod
    def from_wire(cls, data: OpenSearchWire) -> SearchResult:
        term, titles, descriptions, urls = data
        return cls(
            term=term,
            titles=tuple(titles),
            descriptions=tuple(descriptions),
            urls=tuple(urls),
        )

    @property
    def first_title(self) -> str | None:
        return self.titles[0] if self.titles else None

    @property
    def first_url(self) -> str | None:
        return self.urls[0] if self.urls else None


class RPage(BaseModel):
    """One entry of ``query.pages``."""

    ns: int
    title: str
    pageid: int | None = None
    extract: str | None = None
    missing: bool = False


class Query(BaseModel):
    pages: list[RPage]


class SummaryResponse(BaseModel):
    """Response of ``action=query&prop=extracts`` with ``formatversion=2``."""

    batchcomplete: bool = False
    query: Query
