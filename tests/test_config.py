import pytest
from pydantic import ValidationError

from wikipedia_api.config import DEFAULT_API_URL, WikiConfig


def test_config_defaults() -> None:
    config = WikiConfig()

    assert config.api_url == DEFAULT_API_URL
    assert config.timeout is None
    assert config.user_agent


def test_config_accepts_camel_case_json() -> None:
    config = WikiConfig.model_validate_json(
        '{"apiUrl": "https://wiki.example/w/api.php", "userAgent": "test/1.0", "timeout": 3}'
    )

    assert config.api_url == "https://wiki.example/w/api.php"
    assert config.user_agent == "test/1.0"
    assert config.timeout == 3.0


def test_config_accepts_snake_case_arguments() -> None:
    config = WikiConfig(api_url="https://wiki.example/w/api.php", timeout=1.5)

    assert config.api_url == "https://wiki.example/w/api.php"
    assert config.model_dump(by_alias=True)["apiUrl"] == "https://wiki.example/w/api.php"


@pytest.mark.parametrize("timeout", [0, -1])
def test_config_rejects_non_positive_timeout(timeout: float) -> None:
    with pytest.raises(ValidationError):
        WikiConfig(timeout=timeout)
