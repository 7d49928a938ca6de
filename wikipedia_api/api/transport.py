"""HTTP transport for the MediaWiki action API."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from loguru import logger as default_logger

from wikipedia_api.config.schema import WikiConfig
from wikipedia_api.errors import PageRequestError

if TYPE_CHECKING:
    from loguru import Logger


async def fetch(
    url: str,
    *,
    config: WikiConfig | None = None,
    client: httpx.AsyncClient | None = None,
    logger: Logger | None = None,
) -> bytes:
    """Issue a single GET and return the response body.

    Any transport failure, non-2xx status or closed ``client`` is raised as ``PageRequestError``.
    When ``client`` is None a fresh ``httpx.AsyncClient`` is used for this call only.
    """
    cfg = config or WikiConfig()
    log = logger or default_logger
    headers = {"Accept": "application/json", "User-Agent": cfg.user_agent}
    timeout = cfg.timeout if cfg.timeout is not None else httpx.USE_CLIENT_DEFAULT

    if client is not None and client.is_closed:
        log.error("{} GET {} failed: the injected HTTP client is closed", PageRequestError.message, url)
        raise PageRequestError()

    try:
        if client is not None:
            response = await client.get(url, headers=headers, timeout=timeout)
        else:
            async with httpx.AsyncClient() as owned:
                response = await owned.get(url, headers=headers, timeout=timeout)
        response.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        log.error("{} GET {} failed: {}", PageRequestError.message, url, e)
        raise PageRequestError() from e

    log.debug("GET {} -> {}", url, response.status_code)
    return response.content
