"""The public ``Page`` value."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wikipedia_api.client import WikiClient


class PageContent(Enum):
    """Which part of an article to extract."""

    SUMMARY = "summary"
    ALL = "all"


@dataclass(frozen=True, slots=True, order=True)
class Page:
    """A Wikipedia page found by a search.

    Immutable; safe to share between tasks.
    """

    title: str
    url: str

    def __post_init__(self) -> None:
        if not self.title:
            raise ValueError("Page title must not be empty")
        if not self.url:
            raise ValueError("Page url must not be empty")

    def __str__(self) -> str:
        return self.title

    @classmethod
    async def search(cls, term: str, *, client: WikiClient | None = None) -> Page:
        """
        Search Wikipedia for ``term`` and return the best match.

        Args:
            term: Free-form search term. Misspellings are resolved by the API.
            client: Optional client carrying config, HTTP client and logger.

        Raises:
            PageNotFoundError: Nothing matched ``term``.
            PageRequestError: The HTTP request failed.
            JsonParseError: The response was not an opensearch result.
        """
        return await _client(client).search(term)

    async def get_summary(self, *, client: WikiClient | None = None) -> str:
        """
        Fetch the plain-text introduction of this page.

        Raises:
            PageRequestError: The HTTP request failed.
            JsonParseError: The response was not a query result.
            ResponseError: The response held no page.
        """
        return await _client(client).summary(self.title)

    async def get_content(
        self,
        kind: PageContent = PageContent.ALL,
        *,
        client: WikiClient | None = None,
    ) -> str:
        """Fetch this page as plain text; the whole article unless ``kind`` says otherwise."""
        return await _client(client).content(self.title, kind)

    def get_title(self) -> str:
        return self.title

    def get_url(self) -> str:
        return self.url


def _client(client: WikiClient | None) -> WikiClient:
    from wikipedia_api.client import WikiClient

    return client or WikiClient()
