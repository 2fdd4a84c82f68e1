"""Settings persistence helpers."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from .schema import SceneSettings

logger = logging.getLogger(__name__)


class SettingsStore:
    """Load and save :class:`SceneSettings` to disk."""

    @staticmethod
    def settings_path() -> Path:
        """Return the path to the settings JSON file."""
        home = os.environ.get("RASTERKIT_HOME")
        if home:
            base = Path(home).expanduser()
        else:
            base = Path(os.path.expanduser("~/.rasterkit"))
        return base / "settings.json"

    @classmethod
    def ensure_home(cls) -> Path:
        """Ensure the settings directory exists and return it."""
        path = cls.settings_path().parent
        path.mkdir(parents=True, exist_ok=True)
        return path

    @classmethod
    def load(cls, path: Path | None = None) -> SceneSettings:
        """Load settings from *path* (default location when None).

        A missing file yields defaults silently; an unreadable or invalid one
        yields defaults with a warning.
        """
        path = path if path is not None else cls.settings_path()
        if not path.exists():
            logger.debug("no settings at %s, using defaults", path)
            return SceneSettings()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return SceneSettings.model_validate(data)
        except (OSError, ValueError, ValidationError) as e:
            logger.warning("ignoring invalid settings file %s: %s", path, e)
            return SceneSettings()

    @classmethod
    def save(cls, settings: SceneSettings, path: Path | None = None) -> Path:
        """Atomically persist *settings* and return the file written."""
        if path is None:
            cls.ensure_home()
            path = cls.settings_path()
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(".tmp")
        tmp.write_text(settings.model_dump_json(indent=2), encoding="utf-8")
        os.replace(tmp, path)
        logger.info("saved settings to %s", path)
        return path
