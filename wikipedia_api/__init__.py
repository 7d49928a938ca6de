"""
wikipedia_api - a small async client for the Wikipedia search and extracts API
"""

__version__ = "0.1.0"

from wikipedia_api.errors import (
    JsonParseError,
    PageNotFoundError,
    PageRequestError,
    ResponseError,
    WikiError,
)
from wikipedia_api.config import WikiConfig
from wikipedia_api.page import Page, PageContent
from wikipedia_api.client import WikiClient

__all__ = [
    "Page",
    "PageContent",
    "WikiClient",
    "WikiConfig",
    "WikiError",
    "PageNotFoundError",
    "PageRequestError",
    "JsonParseError",
    "ResponseError",
]
