"""Runtime configuration helpers.

Small aggregator that merges the packaged defaults (settings.values), the
persisted settings file (SettingsStore) and command-line overrides into the
single :class:`SceneSettings` used for a render.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from .settings.schema import SceneSettings
from .settings.store import SettingsStore

logger = logging.getLogger(__name__)

# argparse attribute -> SceneSettings field
_SCALAR_OVERRIDES = {
    "width": "width",
    "height": "height",
    "seed": "seed",
    "output": "output",
    "backend": "backend",
}


def make_scene_config(
    *, args: Optional[object] = None, settings: Optional[SceneSettings] = None
) -> SceneSettings:
    """Build the SceneSettings for a render.

    Rules:
    - *settings*, when given, is the base; otherwise the file named by
      ``args.settings`` or the default SettingsStore location is loaded
      (defaults when absent).
    - Attributes on *args* (argparse.Namespace-like) that are not None
      override the base for this run. ``args.counts`` is a mapping merged
      over the base counts.

    Raises:
        pydantic.ValidationError: when the merged values are invalid.
    """
    if settings is None:
        path = getattr(args, "settings", None) if args is not None else None
        settings = SettingsStore.load(Path(path) if path else None)

    data: Dict[str, Any] = settings.model_dump()
    if args is not None:
        for attr, name in _SCALAR_OVERRIDES.items():
            v = getattr(args, attr, None)
            if v is not None:
                data[name] = v
        counts = getattr(args, "counts", None)
        if counts:
            merged = dict(data["counts"])
            merged.update(counts)
            data["counts"] = merged

    merged_settings = SceneSettings.model_validate(data)
    logger.debug("scene config: %s", merged_settings.model_dump())
    return merged_settings
