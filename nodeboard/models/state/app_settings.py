"""Application settings models."""

from pydantic import BaseModel, ConfigDict, field_validator

from nodeboard.constants.defaults import (
    ENDPOINT_URL_DEFAULT,
    PAGE_SIZE_DEFAULT,
    THEME_DEFAULT,
)
from nodeboard.constants.enums import ThemeMode
from nodeboard.constants.limits import PAGE_SIZE_OPTIONS
from nodeboard.constants.timeouts import NODES_REQUEST_TIMEOUT


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    # Data source
    endpoint_url: str = ENDPOINT_URL_DEFAULT
    request_timeout_seconds: float = NODES_REQUEST_TIMEOUT

    # UI preferences
    theme: str = THEME_DEFAULT
    page_size: int = PAGE_SIZE_DEFAULT

    @field_validator("theme")
    @classmethod
    def _check_theme(cls, value: str) -> str:
        normalized = str(value or "").strip().lower()
        if normalized not in {mode.value for mode in ThemeMode}:
            return THEME_DEFAULT
        return normalized

    @field_validator("page_size")
    @classmethod
    def _check_page_size(cls, value: int) -> int:
        if value not in PAGE_SIZE_OPTIONS:
            raise ValueError(f"page_size must be one of {PAGE_SIZE_OPTIONS}")
        return value

    @field_validator("request_timeout_seconds")
    @classmethod
    def _check_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("request_timeout_seconds must be positive")
        return value


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
