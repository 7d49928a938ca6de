"""Decode API response bodies and pull out the first match."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger as default_logger
from pydantic import ValidationError

from wikipedia_api.api.models import OPENSEARCH_ADAPTER, SearchResult, SummaryResponse
from wikipedia_api.errors import JsonParseError, PageNotFoundError, ResponseError
from wikipedia_api.page import Page

if TYPE_CHECKING:
    from loguru import Logger


def decode_search(body: bytes | str, *, logger: Logger | None = None) -> SearchResult:
    """Parse an opensearch body into a ``SearchResult``."""
    log = logger or default_logger
    try:
        data = OPENSEARCH_ADAPTER.validate_json(body)
    except ValidationError as e:
        log.error("{} opensearch body did not match [term, titles, descriptions, urls]: {}", JsonParseError.message, e)
        raise JsonParseError() from e
    return SearchResult.from_wire(data)


def extract_page(result: SearchResult, term: str) -> Page:
    """Build a ``Page`` from the best match, or fail with the caller's original term."""
    title = result.first_title
    url = result.first_url
    if not title or not url:
        raise PageNotFoundError(term)
    return Page(title=title, url=url)


def decode_summary(body: bytes | str, *, logger: Logger | None = None) -> SummaryResponse:
    """Parse a ``query``/``extracts`` body into a ``SummaryResponse``."""
    log = logger or default_logger
    try:
        return SummaryResponse.model_validate_json(body)
    except ValidationError as e:
        log.error("{} extracts body did not match query.pages: {}", JsonParseError.message, e)
        raise JsonParseError() from e


def extract_text(response: SummaryResponse) -> str:
    """Return the plain-text extract of the first page, verbatim."""
    pages = response.query.pages
    if not pages:
        raise ResponseError()
    first = pages[0]
    if first.missing or first.extract is None:
        raise ResponseError()
    return first.extract
