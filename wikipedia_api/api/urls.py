"""Request URL builders for the MediaWiki action API."""

from wikipedia_api.config.schema import DEFAULT_API_URL

SEARCH_QUERY = "action=opensearch&search={term}&limit=1&namespace=0&format=json"
SUMMARY_QUERY = (
    "action=query&format=json&prop=extracts&titles={title}"
    "&formatversion=2&exintro=1&explaintext=1"
)
CONTENT_QUERY = "action=query&format=json&prop=extracts&titles={title}&formatversion=2&explaintext=1"


def build_search_url(term: str, *, api_url: str = DEFAULT_API_URL) -> str:
    """Build an opensearch URL asking for the single best match of ``term``.

    Only spaces are escaped (as ``%20``); other characters pass through as-is.
    """
    encoded = term.replace(" ", "%20").strip()
    return f"{api_url}?{SEARCH_QUERY.format(term=encoded)}"


def build_summary_url(title: str, *, api_url: str = DEFAULT_API_URL) -> str:
    """Build a plain-text extract URL for the introduction of ``title``."""
    return f"{api_url}?{SUMMARY_QUERY.format(title=title)}"


def build_content_url(title: str, *, api_url: str = DEFAULT_API_URL) -> str:
    """Build a plain-text extract URL for the whole article ``title``."""
    return f"{api_url}?{CONTENT_QUERY.format(title=title)}"
