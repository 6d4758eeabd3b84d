"""Settings management for Illien."""

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .errors import SettingsError

logger = logging.getLogger(__name__)

APP_NAME = "illien"
SETTINGS_FILENAME = "settings.json"


def config_dir() -> Path:
    """Per-user config directory. ILLIEN_CONFIG_HOME overrides the platform default."""
    override = os.environ.get("ILLIEN_CONFIG_HOME")
    if override:
        return Path(override).expanduser()
    return Path(user_config_dir(APP_NAME))


def resolve_config_path() -> Path:
    """Path of the settings file. Creates the config directory as a side effect."""
    directory = config_dir()
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.debug(f"Could not create config directory {directory}: {e}")
    return directory / SETTINGS_FILENAME


@dataclass
class Settings:
    """Illien user preferences. None means never configured."""

    journal_directory: str | None = None
    dark_mode: bool | None = None

    def save(self) -> None:
        """Write all settings to file, replacing any previous content."""
        path = resolve_config_path()
        try:
            content = json.dumps(asdict(self), indent=2)
        except (TypeError, ValueError) as e:
            raise SettingsError(f"Failed to serialize settings: {e}") from e
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise SettingsError(f"Failed to write settings: {e}") from e

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from file. Missing or unreadable files give defaults."""
        path = resolve_config_path()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return cls()
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.debug(f"Ignoring unreadable settings file {path}: {e}")
            return cls()
        if not isinstance(data, dict):
            logger.debug(f"Ignoring settings file {path}: not a JSON object")
            return cls()

        journal_directory = data.get("journal_directory")
        dark_mode = data.get("dark_mode")
        # A mistyped field invalidates the whole file, not just that field
        if not isinstance(journal_directory, (str, type(None))) or not isinstance(
            dark_mode, (bool, type(None))
        ):
            logger.debug(f"Ignoring settings file {path}: unexpected field types")
            return cls()
        return cls(journal_directory=journal_directory, dark_mode=dark_mode)


def load_settings() -> Settings:
    return Settings.load()


def save_settings(settings: Settings) -> None:
    settings.save()


def get_journal_directory() -> str | None:
    """Saved journal directory, or None if never set."""
    return load_settings().journal_directory


def set_journal_directory(directory: str) -> None:
    """Save the journal directory. The path is stored as given, unchecked."""
    settings = load_settings()
    settings.journal_directory = directory
    save_settings(settings)


def get_dark_mode() -> bool | None:
    """Saved dark mode preference, or None if never set."""
    return load_settings().dark_mode


def set_dark_mode(dark_mode: bool) -> None:
    settings = load_settings()
    settings.dark_mode = dark_mode
    save_settings(settings)
