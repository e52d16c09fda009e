"""Configuration: defaults, YAML file and environment overrides.

Precedence (highest to lowest):
1. CLI flags (applied by the caller via ``with_overrides``)
2. env vars PERFLIMIT_READER, PERFLIMIT_COLOR
3. YAML file ($PERFLIMIT_CONFIG or $XDG_CONFIG_HOME/perflimit/config.yaml)
4. built-in defaults

Example config.yaml:

    reader: busybox
    reader_args: [devmem]
    timeout_s: 2
    color: never
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from perflimit.environment import COLOR_MODES
from perflimit.mmio import DEFAULT_READER, DEFAULT_READER_ARGS, DEFAULT_TIMEOUT_S

logger = logging.getLogger(__name__)

_KNOWN_KEYS = {"reader", "reader_args", "timeout_s", "color"}


@dataclass(frozen=True)
class PerfLimitConfig:
    """Settings for one invocation."""

    reader: str = DEFAULT_READER
    reader_args: tuple[str, ...] = DEFAULT_READER_ARGS
    timeout_s: float = DEFAULT_TIMEOUT_S
    color: str = "auto"

    def with_overrides(self, **overrides: Any) -> "PerfLimitConfig":
        """Return a copy with every non-None override applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        return _checked(replace(self, **values))


def default_config_path() -> Path:
    env = (os.getenv("PERFLIMIT_CONFIG", "") or "").strip()
    if env:
        return Path(env).expanduser()
    xdg = (os.getenv("XDG_CONFIG_HOME", "") or "").strip()
    base = Path(xdg).expanduser() if xdg else Path("~/.config").expanduser()
    return base / "perflimit" / "config.yaml"


def _checked(cfg: PerfLimitConfig) -> PerfLimitConfig:
    if not cfg.reader:
        raise ValueError("reader must be a non-empty command")
    if cfg.color not in COLOR_MODES:
        raise ValueError(f"color must be one of {', '.join(COLOR_MODES)}, got {cfg.color!r}")
    if cfg.timeout_s <= 0:
        raise ValueError(f"timeout_s must be positive, got {cfg.timeout_s}")
    return cfg


def _from_mapping(data: dict[str, Any], source: str) -> dict[str, Any]:
    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ValueError(f"{source}: unknown keys: {', '.join(unknown)}")

    values: dict[str, Any] = {}
    if "reader" in data:
        values["reader"] = str(data["reader"])
    if "reader_args" in data:
        raw = data["reader_args"]
        if raw is None:
            raw = []
        if not isinstance(raw, list):
            raise ValueError(f"{source}: reader_args must be a list")
        values["reader_args"] = tuple(str(a) for a in raw)
    if "timeout_s" in data:
        try:
            values["timeout_s"] = float(data["timeout_s"])
        except (TypeError, ValueError) as exc:
            raise ValueError(f"{source}: timeout_s must be a number") from exc
    if "color" in data:
        values["color"] = str(data["color"])
    return values


def load_config(path: Optional[Union[str, Path]] = None) -> PerfLimitConfig:
    """Load configuration from YAML and the environment.

    Args:
        path: Explicit config file. When given it must exist; otherwise
            the default location is used if present.

    Raises:
        FileNotFoundError: If an explicit *path* does not exist.
        ValueError: If the file is malformed or a value is invalid.
    """
    explicit = path is not None
    cfg_path = Path(path).expanduser() if explicit else default_config_path()

    values: dict[str, Any] = {}
    if cfg_path.exists():
        with open(cfg_path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ValueError(f"Invalid config file {cfg_path}: {exc}") from exc
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Invalid config file (expected mapping): {cfg_path}")
        values.update(_from_mapping(data, str(cfg_path)))
        logger.debug("Loaded config from %s", cfg_path)
    elif explicit:
        raise FileNotFoundError(f"Config file not found: {cfg_path}")

    env_reader = (os.getenv("PERFLIMIT_READER", "") or "").strip()
    if env_reader:
        values["reader"] = env_reader
    env_color = (os.getenv("PERFLIMIT_COLOR", "") or "").strip().lower()
    if env_color:
        values["color"] = env_color

    return _checked(PerfLimitConfig(**values))
