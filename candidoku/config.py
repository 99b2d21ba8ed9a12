"""
Solver configuration, read from a TOML file and merged over the defaults:

[logging]
level = "INFO"
format = "%(levelname)s %(name)s: %(message)s"

[puzzle]
blanks = ["x", "_", "."]

[output]
show_candidates = false
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple
import logging
import os

import toml

from .errors import ConfigError

DEFAULT_CONFIG_PATH = "sudoku.toml"

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "logging": {
        "level": "INFO",
        "format": "%(levelname)s %(name)s: %(message)s",
    },
    "puzzle": {
        "blanks": ["x", "_", "."],
    },
    "output": {
        "show_candidates": False,
    },
}


@dataclass(frozen=True)
class SolverConfig:
    log_level: int
    log_format: str
    blanks: Tuple[str, ...]
    show_candidates: bool


def _merge(overrides: Mapping[str, Any]) -> Dict[str, Dict[str, Any]]:
    """Section-wise merge: defaults first, then whatever the file sets."""
    merged = {section: dict(values) for section, values in DEFAULTS.items()}
    for section, values in overrides.items():
        if not isinstance(values, Mapping):
            raise ConfigError(f"[{section}] must be a table")
        merged.setdefault(section, {}).update(values)
    return merged


def _log_level(name: Any) -> int:
    if not isinstance(name, str):
        raise ConfigError(f"logging.level must be a string, got {name!r}")
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ConfigError(f"Unknown logging.level {name!r}")
    return level


def from_mapping(data: Mapping[str, Any]) -> SolverConfig:
    cfg = _merge(data)

    blanks = cfg["puzzle"]["blanks"]
    if isinstance(blanks, str):
        blanks = [blanks]
    if not blanks or not all(isinstance(b, str) and b.strip() for b in blanks):
        raise ConfigError("puzzle.blanks must be a list of non-empty strings")
    if any(b.strip().isdigit() and b.strip() != "0" for b in blanks):
        raise ConfigError("puzzle.blanks cannot contain the digits 1-9")

    show_candidates = cfg["output"]["show_candidates"]
    if not isinstance(show_candidates, bool):
        raise ConfigError("output.show_candidates must be true or false")

    log_format = cfg["logging"]["format"]
    if not isinstance(log_format, str):
        raise ConfigError("logging.format must be a string")

    return SolverConfig(
        log_level=_log_level(cfg["logging"]["level"]),
        log_format=log_format,
        blanks=tuple(b.strip() for b in blanks),
        show_candidates=show_candidates,
    )


def load_config(path: Optional[str] = None) -> SolverConfig:
    """
    Load configuration from `path`. Without a path, sudoku.toml in the working
    directory is used if it exists, and the defaults otherwise.
    """
    if path is None:
        if not os.path.exists(DEFAULT_CONFIG_PATH):
            return from_mapping({})
        path = DEFAULT_CONFIG_PATH

    try:
        data = toml.load(path)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except toml.TomlDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    return from_mapping(data)
