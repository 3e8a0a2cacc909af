"""YAML configuration loader layered under environment settings.

Layers, later ones winning:

  1. ``Settings`` defaults
  2. ``config/config.yaml`` (optional, checked into the deploying repo)
  3. ``.env`` file and environment variables

Nested YAML sections are flattened with ``_`` so that::

    youtube:
      query_concurrency: 2

sets ``youtube_query_concurrency``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from tracksource.config.settings import Settings


def load_settings(path: str = "config/config.yaml") -> Settings:
    """Build ``Settings`` from the YAML file at *path* plus the environment.

    A missing file is not an error; the environment and defaults apply.
    """
    config_path = Path(path)
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            yaml_config = yaml.safe_load(f) or {}
    else:
        yaml_config = {}

    values: dict[str, Any] = {}
    _flatten(yaml_config, "", values)

    # Only fields that actually came from the environment override YAML.
    env_settings = Settings()
    for name in env_settings.model_fields_set:
        values[name] = getattr(env_settings, name)

    return Settings(**values)


def _flatten(node: dict, prefix: str, out: dict[str, Any]) -> None:
    """Flatten nested mappings into ``section_key`` names, mutating *out*."""
    for key, value in node.items():
        name = f"{prefix}_{key}" if prefix else str(key)
        if isinstance(value, dict):
            _flatten(value, name, out)
        else:
            out[name] = value
