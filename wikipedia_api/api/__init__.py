"""Query building, transport and response decoding for the MediaWiki action API."""

from wikipedia_api.api.decoder import decode_search, decode_summary, extract_page, extract_text
from wikipedia_api.api.models import RPage, SearchResult, SummaryResponse
from wikipedia_api.api.transport import fetch
from wikipedia_api.api.urls import build_content_url, build_search_url, build_summary_url

__all__ = [
    "build_search_url",
    "build_summary_url",
    "build_content_url",
    "fetch",
    "decode_search",
    "decode_summary",
    "extract_page",
    "extract_text",
    "SearchResult",
    "SummaryResponse",
    "RPage",
]
