"""Configuration schema using Pydantic."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_API_URL = "https://en.wikipedia.org/w/api.php"
DEFAULT_USER_AGENT = "wikipedia-api-py/0.1 (https://github.com/wikipedia-api-py)"


class Base(BaseModel):
    """Base model that accepts both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WikiConfig(Base):
    """Settings for talking to the Wikipedia API."""

    api_url: str = DEFAULT_API_URL
    user_agent: str = DEFAULT_USER_AGENT
    # None keeps httpx's own default timeout
    timeout: float | None = Field(default=None, gt=0)
