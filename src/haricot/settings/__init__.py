"""Settings for haricot: built-in presets, config file and environment.

Exports:
    - Settings: Options passed to the analysis operations
    - load_settings: Merge defaults, a JSON config file and HAR_* variables
    - load_ecs_presets: Built-in ECS exclude lists
"""

from __future__ import annotations

from haricot.settings.loader import (
    ENV_PREFIX,
    Settings,
    load_ecs_presets,
    load_json_file,
    load_settings,
    parse_bool,
)

__all__ = [
    "ENV_PREFIX",
    "Settings",
    "load_ecs_presets",
    "load_json_file",
    "load_settings",
    "parse_bool",
]
