"""Configuration module for wikipedia_api."""

from wikipedia_api.config.schema import DEFAULT_API_URL, DEFAULT_USER_AGENT, WikiConfig

__all__ = ["WikiConfig", "DEFAULT_API_URL", "DEFAULT_USER_AGENT"]
