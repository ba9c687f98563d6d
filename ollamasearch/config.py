"""Runtime configuration read from the environment."""

from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ollamasearch.errors import ConfigError

DEFAULT_BASE_URL = "https://ollama.com"
DEFAULT_TIMEOUT = 5.0


class SearchConfig(BaseSettings):
    """Settings for one search invocation.

    ``OLLAMASEARCHDEBUG`` and ``OLLAMA_BASE_URL`` keep their historical names;
    the remaining fields use the ``OLLAMASEARCH_`` prefix.
    """

    base_url: str = Field(default=DEFAULT_BASE_URL, validation_alias="OLLAMA_BASE_URL")
    debug: bool = Field(default=False, validation_alias="OLLAMASEARCHDEBUG")
    timeout: float = DEFAULT_TIMEOUT

    model_config = SettingsConfigDict(
        env_prefix="OLLAMASEARCH_",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("base_url", mode="before")
    @classmethod
    def _default_when_empty(cls, value: Any) -> Any:
        return value or DEFAULT_BASE_URL

    @field_validator("debug", mode="before")
    @classmethod
    def _enabled_when_set(cls, value: Any) -> Any:
        # Any non-empty value turns debug on, including "0" and "false".
        if isinstance(value, str):
            return value != ""
        return value

    @property
    def search_url(self) -> str:
        """Full URL of the search endpoint."""
        return f"{self.base_url.rstrip('/')}/search"


def load_config() -> SearchConfig:
    """Read settings from the environment."""
    try:
        return SearchConfig()
    except ValidationError as e:
        fields = ", ".join(str(error["loc"][0]) for error in e.errors() if error["loc"])
        raise ConfigError(f"invalid configuration: {fields or e}") from e
