"""Errors raised by Wikipedia API operations."""

from __future__ import annotations


class WikiError(Exception):
    """Base class for every failure a library operation can raise."""

    message = "WikiError: Unknown error."

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WikiError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.args))


class PageNotFoundError(WikiError):
    """The search returned no usable title/url pair."""

    def __init__(self, term: str):
        super().__init__(term)
        self.term = term

    @property
    def message(self) -> str:  # type: ignore[override]
        return f"PageNotFound: Couldn't find '{self.term}'."


class PageRequestError(WikiError):
    """The HTTP request to Wikipedia failed."""

    message = "PageRequestError: Internal error."


class JsonParseError(WikiError):
    """The response body did not match the expected JSON shape."""

    message = "JsonParseError: Internal response parsing error."


class ResponseError(WikiError):
    """The response was well formed but held no usable page."""

    message = "ResponseError: Response contained no pages."
