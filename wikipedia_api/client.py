"""Wikipedia client: build, send, decode, extract."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from wikipedia_api.api.decoder import decode_search, decode_summary, extract_page, extract_text
from wikipedia_api.api.transport import fetch
from wikipedia_api.api.urls import build_content_url, build_search_url, build_summary_url
from wikipedia_api.config.schema import WikiConfig
from wikipedia_api.page import Page, PageContent

if TYPE_CHECKING:
    from loguru import Logger


class WikiClient:
    """Runs each request as one linear pipeline; the first failure is raised.

    Holds no mutable state, so one instance can serve any number of concurrent tasks.
    Pass ``http_client`` to reuse a connection pool you own, and ``logger`` to route
    diagnostics somewhere other than loguru's global logger.
    """

    def __init__(
        self,
        config: WikiConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        logger: Logger | None = None,
    ):
        self.config = config or WikiConfig()
        self.http_client = http_client
        self.logger = logger

    async def search(self, term: str) -> Page:
        """Return the best matching page for ``term``."""
        url = build_search_url(term, api_url=self.config.api_url)
        body = await self._fetch(url)
        result = decode_search(body, logger=self.logger)
        return extract_page(result, term)

    async def summary(self, title: str) -> str:
        """Return the plain-text introduction of the page titled ``title``."""
        return await self.content(title, PageContent.SUMMARY)

    async def content(self, title: str, kind: PageContent = PageContent.ALL) -> str:
        """Return a plain-text extract of ``title``: the introduction or the whole article."""
        if kind is PageContent.SUMMARY:
            url = build_summary_url(title, api_url=self.config.api_url)
        else:
            url = build_content_url(title, api_url=self.config.api_url)
        body = await self._fetch(url)
        response = decode_summary(body, logger=self.logger)
        return extract_text(response)

    async def _fetch(self, url: str) -> bytes:
        return await fetch(url, config=self.config, client=self.http_client, logger=self.logger)
