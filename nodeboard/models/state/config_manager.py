"""Settings persistence for the node dashboard."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from nodeboard.constants.defaults import CONFIG_FILE_DEFAULT
from nodeboard.constants.values import CONFIG_PATH_ENV
from nodeboard.models.state.app_settings import (
    AppSettings,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads and saves AppSettings as a JSON file.

    The file location is, in order of precedence, the explicit ``path``
    argument, the ``NODEBOARD_CONFIG`` environment variable, and
    ``~/.config/nodeboard/settings.json``.
    """

    @staticmethod
    def resolve_path(path: Path | str | None = None) -> Path:
        if path:
            return Path(path).expanduser()
        env_path = os.environ.get(CONFIG_PATH_ENV, "").strip()
        if env_path:
            return Path(env_path).expanduser()
        return CONFIG_FILE_DEFAULT

    @classmethod
    def load(cls, path: Path | str | None = None) -> AppSettings:
        """Load settings, returning defaults when no file exists.

        Raises:
            ConfigLoadError: If the file cannot be read or fails validation.
        """
        config_path = cls.resolve_path(path)
        if not config_path.exists():
            logger.debug("No settings file at %s, using defaults", config_path)
            return AppSettings()
        try:
            raw = config_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigLoadError(f"Cannot read {config_path}: {exc}") from exc
        try:
            return AppSettings.model_validate_json(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {config_path}: {exc}") from exc

    @classmethod
    def save(cls, settings: AppSettings, path: Path | str | None = None) -> Path:
        """Write settings to disk and return the path written.

        Raises:
            ConfigSaveError: If the file cannot be written.
        """
        config_path = cls.resolve_path(path)
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            config_path.write_text(
                settings.model_dump_json(indent=2),
                encoding="utf-8",
            )
        except OSError as exc:
            raise ConfigSaveError(f"Cannot write {config_path}: {exc}") from exc
        logger.debug("Saved settings to %s", config_path)
        return config_path

    @classmethod
    def reset(cls, path: Path | str | None = None) -> AppSettings:
        """Overwrite the settings file with defaults."""
        settings = AppSettings()
        cls.save(settings, path)
        return settings
