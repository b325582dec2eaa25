"""Settings loading for haricot.

Settings are layered: built-in defaults (including the ECS exclude presets
from ``ecs.json``), then an optional JSON config file, then ``HAR_*``
environment variables.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from haricot.errors import SettingsError

_LOGGER = logging.getLogger(__name__)

ENV_PREFIX = "HAR_"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


def _get_builtin_path(filename: str) -> Path:
    """Get path to a settings file shipped with the package."""
    return Path(__file__).parent / filename


def load_json_file(path: Path | str) -> dict[str, Any]:
    """Load a JSON object from a file.

    Raises:
        SettingsError: If the file cannot be read, parsed, or is not an object
    """
    path_str = str(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise SettingsError(f"Config file not found: {path_str}") from e
    except PermissionError as e:
        raise SettingsError(f"Permission denied reading config file: {path_str}") from e
    except json.JSONDecodeError as e:
        raise SettingsError(f"Invalid JSON in config file {path_str}: {e}") from e
    if not isinstance(data, dict):
        raise SettingsError(f"Config file {path_str} must contain a JSON object")
    return data


def _name_list(data: Mapping[str, Any], key: str, source: str) -> frozenset[str]:
    values = data.get(key, [])
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise SettingsError(f"'{key}' in {source} must be a list of strings")
    return frozenset(values)


def load_ecs_presets() -> tuple[frozenset[str], frozenset[str]]:
    """Load the built-in ECS exclude lists.

    Returns:
        Tuple of (query_string_excludes, header_excludes)
    """
    path = _get_builtin_path("ecs.json")
    data = load_json_file(path)
    return (
        _name_list(data, "query_string_excludes", str(path)),
        _name_list(data, "header_excludes", str(path)),
    )


def parse_bool(value: str, name: str = "value") -> bool:
    """Parse a boolean from an environment variable string.

    Raises:
        SettingsError: If the string is not a recognized boolean
    """
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise SettingsError(f"{name} must be a boolean, got {value!r}")


@dataclass(frozen=True)
class Settings:
    """Options passed to the analysis operations.

    Attributes:
        short_url: Show request URLs without their query component
        expand_private: Expand private data when extracting bodies
        use_ecs_excludes: Hide the configured names from summary listings
        verbosity: Log verbosity (0=WARNING, 1=INFO, 2+=DEBUG)
        query_string_excludes: Query parameter names hidden with ECS filtering
        header_excludes: Header names hidden with ECS filtering
    """

    short_url: bool = True
    expand_private: bool = False
    use_ecs_excludes: bool = False
    verbosity: int = 0
    query_string_excludes: frozenset[str] = field(default_factory=frozenset)
    header_excludes: frozenset[str] = field(default_factory=frozenset)

    def overview_excludes(self) -> tuple[frozenset[str] | None, frozenset[str] | None]:
        """Exclude sets for the overview, or (None, None) to show everything."""
        if not self.use_ecs_excludes:
            return None, None
        return self.query_string_excludes, self.header_excludes


def _apply_file(settings: Settings, data: Mapping[str, Any], source: str) -> Settings:
    changes: dict[str, Any] = {}
    for key in ("short_url", "expand_private", "use_ecs_excludes"):
        if key in data:
            if not isinstance(data[key], bool):
                raise SettingsError(f"'{key}' in {source} must be a boolean")
            changes[key] = data[key]
    if "verbosity" in data:
        verbosity = data["verbosity"]
        if isinstance(verbosity, bool) or not isinstance(verbosity, int) or verbosity < 0:
            raise SettingsError(f"'verbosity' in {source} must be a non-negative integer")
        changes["verbosity"] = verbosity
    # Names from the config file extend the presets
    if "query_string_excludes" in data:
        changes["query_string_excludes"] = settings.query_string_excludes | _name_list(
            data, "query_string_excludes", source
        )
    if "header_excludes" in data:
        changes["header_excludes"] = settings.header_excludes | _name_list(data, "header_excludes", source)
    return replace(settings, **changes)


def _apply_environment(settings: Settings, environ: Mapping[str, str]) -> Settings:
    changes: dict[str, Any] = {}
    for key in ("short_url", "expand_private", "use_ecs_excludes"):
        env_name = ENV_PREFIX + key.upper()
        if env_name in environ:
            changes[key] = parse_bool(environ[env_name], env_name)
    env_name = ENV_PREFIX + "VERBOSITY"
    if env_name in environ:
        try:
            verbosity = int(environ[env_name])
        except ValueError as e:
            raise SettingsError(f"{env_name} must be an integer, got {environ[env_name]!r}") from e
        if verbosity < 0:
            raise SettingsError(f"{env_name} must be non-negative")
        changes["verbosity"] = verbosity
    return replace(settings, **changes)


def load_settings(
    config_path: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Build settings from defaults, a config file and the environment.

    Args:
        config_path: Optional JSON config file
        environ: Environment mapping (default: ``os.environ``)

    Returns:
        Merged settings

    Raises:
        SettingsError: If the config file or an environment variable is invalid

    Example:
        >>> settings = load_settings(environ={"HAR_SHORT_URL": "no"})
        >>> settings.short_url
        False
    """
    query_excludes, header_excludes = load_ecs_presets()
    settings = Settings(query_string_excludes=query_excludes, header_excludes=header_excludes)

    if config_path is not None:
        _LOGGER.debug("Loading config file: %s", config_path)
        settings = _apply_file(settings, load_json_file(config_path), str(config_path))

    settings = _apply_environment(settings, os.environ if environ is None else environ)
    return settings
