"""Display and runtime settings for the interactive string tools.

Settings are stored in a flat JSON object whose keys mirror the fields of
:class:`StringAlgoConfig`.  Omitted keys keep their defaults; unknown keys and
ill-typed values raise :class:`ConfigError` so that typos do not silently fall
back to defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
import json
import logging
from pathlib import Path
from typing import Any, Mapping

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration payload is malformed."""


@dataclass(frozen=True, slots=True)
class StringAlgoConfig:
    """Settings consumed by ``string_menu``."""

    separator_display: str = "$"
    empty_marker: str = "(none)"
    show_auxiliary: bool = True
    list_suffixes: bool = True
    suffix_warning_length: int = 5000

    def __post_init__(self) -> None:
        if not isinstance(self.separator_display, str) or len(self.separator_display) != 1:
            raise ConfigError("separator_display must be a single character")
        if not isinstance(self.empty_marker, str):
            raise ConfigError("empty_marker must be a string")
        for name in ("show_auxiliary", "list_suffixes"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(f"{name} must be a boolean")
        limit = self.suffix_warning_length
        if isinstance(limit, bool) or not isinstance(limit, int):
            raise ConfigError("suffix_warning_length must be an integer")
        if limit < 0:
            raise ConfigError("suffix_warning_length must be non-negative")

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "StringAlgoConfig":
        """Build a config from *payload*, rejecting unknown keys."""

        known = {field.name for field in fields(cls)}
        unknown = sorted(set(payload) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")
        return replace(cls(), **dict(payload))


def load_config(path: Path | str | None) -> StringAlgoConfig:
    """Load settings from a JSON file, or return defaults when *path* is ``None``."""

    if path is None:
        return StringAlgoConfig()

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")
    try:
        payload = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration {config_path}: {exc}") from exc
    if not isinstance(payload, Mapping):
        raise ConfigError("Configuration must be a JSON object")

    config = StringAlgoConfig.from_mapping(payload)
    logger.info("Loaded configuration from %s", config_path)
    return config


__all__ = ["ConfigError", "StringAlgoConfig", "load_config"]
