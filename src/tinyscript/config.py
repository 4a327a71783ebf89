"""Interpreter settings loaded from an optional ``tinyscript.yaml`` file."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = "tinyscript.yaml"


@dataclass
class Settings:
    """Knobs the driver applies around a run."""

    strict_strings: bool = True     # unterminated string literal raises LexError
    recursion_limit: int = 10000    # host recursion limit for deep script recursion
    encoding: str = "utf-8"         # source file encoding


def _parse_settings(raw: Dict[str, Any], origin: str) -> Settings:
    known = {f.name: f for f in fields(Settings)}
    unknown = sorted(key for key in raw if key not in known)
    if unknown:
        raise ValueError(f"{origin}: unknown settings: {', '.join(unknown)}")

    defaults = Settings()
    values: Dict[str, Any] = {}
    for name, value in raw.items():
        expected = type(getattr(defaults, name))
        # bool is an int subclass; keep the two apart
        if type(value) is not expected:
            raise ValueError(
                f"{origin}: setting '{name}' must be {expected.__name__}, got {type(value).__name__}"
            )
        values[name] = value

    settings = Settings(**values)
    if settings.recursion_limit < 100:
        raise ValueError(f"{origin}: recursion_limit must be at least 100")
    return settings


def load_settings(path: Path | str) -> Settings:
    """Load a YAML settings file and return the normalised ``Settings``."""

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"settings file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, dict):
        raise ValueError(f"settings must be a mapping, got {type(data)!r}")

    return _parse_settings(data, str(config_path))


def find_settings(directory: Path | str) -> Optional[Path]:
    """Return the settings file in ``directory``, if there is one."""
    candidate = Path(directory) / CONFIG_FILENAME
    if candidate.is_file():
        return candidate
    return None
