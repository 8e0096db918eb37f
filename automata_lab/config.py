"""Settings for the CLI and the Streamlit app.

Defaults, overlaid by an optional YAML file, overlaid by ``AUTOMATA_*``
environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from automata_lab.definitions import available_kinds
from automata_lab.errors import ConfigError
from automata_lab.logging import LEVELS

ENV_PREFIX = "AUTOMATA_"


@dataclass
class Settings:
    default_kind: str = "email"
    animation_delay: float = 0.5
    log_level: str = "warning"
    log_format: str = "text"

    def validate(self) -> None:
        if self.default_kind not in available_kinds():
            raise ConfigError("default_kind", f"Must be one of {available_kinds()}, got {self.default_kind!r}")
        if self.animation_delay < 0:
            raise ConfigError("animation_delay", f"Must be >= 0, got {self.animation_delay}")
        if self.log_level.lower() not in LEVELS:
            raise ConfigError("log_level", f"Unknown level {self.log_level!r}")
        if self.log_format not in ("json", "text"):
            raise ConfigError("log_format", f"Must be 'json' or 'text', got {self.log_format!r}")


def _coerce(name: str, value):
    if name == "animation_delay":
        try:
            return float(value)
        except (TypeError, ValueError):
            raise ConfigError(name, f"Must be a number, got {value!r}") from None
    return str(value)


def load_settings(path: Optional[Path] = None, environ=None) -> Settings:
    """
    Load settings.

    Args:
        path: Optional YAML file; a missing file is ignored
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Validated Settings

    Raises:
        ConfigError: On an unreadable file or an invalid value
    """
    environ = os.environ if environ is None else environ
    values = {}

    if path is not None and Path(path).exists():
        try:
            data = yaml.safe_load(Path(path).read_text()) or {}
        except yaml.YAMLError as e:
            raise ConfigError("file", f"Failed to parse {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError("file", f"{path} must contain a mapping")
        values.update(data)

    known = {f.name for f in fields(Settings)}
    for name in known:
        env_value = environ.get(ENV_PREFIX + name.upper())
        if env_value is not None:
            values[name] = env_value

    unknown = set(values) - known
    if unknown:
        raise ConfigError(sorted(unknown)[0], "Unknown setting")

    settings = Settings(**{name: _coerce(name, value) for name, value in values.items()})
    settings.validate()
    return settings
