"""Helpers for loading and validating simulator configuration."""

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml  # type: ignore[import-untyped]

from lifesim.core.exceptions import ConfigurationError
from lifesim.core.patterns import list_available_patterns
from lifesim.utils.consts import (
    DEFAULT_HEIGHT,
    DEFAULT_PATTERN,
    DEFAULT_TICK_INTERVAL,
    DEFAULT_WIDTH,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    seed: Optional[int] = None
    pattern: str = DEFAULT_PATTERN


@dataclass(frozen=True)
class TimingConfig:
    tick_interval: float = DEFAULT_TICK_INTERVAL


@dataclass(frozen=True)
class SimulatorConfig:
    board: BoardConfig
    timing: TimingConfig


# Configuration cache with thread safety
_LOADER_CACHE: dict[str, SimulatorConfig] = {}
_CACHE_LOCK = threading.RLock()


def _get_config_path(path: Optional[str] = None) -> str:
    if path is None:
        # Bundled defaults live next to the package
        path = str(Path(__file__).parent.parent / "config.yaml")

    return path


def _load_yaml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Failed to parse config: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError("Config root must be a mapping")
    return raw


def _section(raw: dict[str, Any], key: str) -> dict[str, Any]:
    value = raw.get(key) or {}
    if not isinstance(value, dict):
        raise ConfigurationError(key, "section must be a mapping")
    return value


def _positive_int(section: dict[str, Any], key: str, default: int) -> int:
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigurationError(key, f"must be a positive integer, got {value!r}")
    return value


def _build_board_cfg(board_raw: dict[str, Any]) -> BoardConfig:
    seed = board_raw.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise ConfigurationError("seed", f"must be an integer or null, got {seed!r}")

    pattern = str(board_raw.get("pattern", DEFAULT_PATTERN))
    available = list_available_patterns()
    if pattern not in available:
        raise ConfigurationError(
            "pattern", f"unknown pattern {pattern!r}, expected one of {available}"
        )

    return BoardConfig(
        width=_positive_int(board_raw, "width", DEFAULT_WIDTH),
        height=_positive_int(board_raw, "height", DEFAULT_HEIGHT),
        seed=seed,
        pattern=pattern,
    )


def _build_timing_cfg(timing_raw: dict[str, Any]) -> TimingConfig:
    value = timing_raw.get("tick_interval", DEFAULT_TICK_INTERVAL)
    try:
        interval = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError("tick_interval", f"not a number: {value!r}") from exc
    if interval <= 0:
        raise ConfigurationError("tick_interval", "must be positive")
    return TimingConfig(tick_interval=interval)


def _parse_simulator_cfg_from_dict(raw: dict[str, Any]) -> SimulatorConfig:
    return SimulatorConfig(
        board=_build_board_cfg(_section(raw, "board")),
        timing=_build_timing_cfg(_section(raw, "timing")),
    )


def load_config(path: Optional[str] = None) -> SimulatorConfig:
    """Load and validate configuration from a YAML file.

    Args:
        path: Optional path to YAML config. If None, load the bundled
            lifesim/config.yaml.

    Returns:
        SimulatorConfig instance

    Raises:
        ConfigurationError: on parse or validation errors
    """

    p = Path(_get_config_path(path=path))
    logger.debug("loading config from %s", p)
    raw = _load_yaml_file(p)

    return _parse_simulator_cfg_from_dict(raw=raw)


def get_config(path: Optional[str] = None) -> SimulatorConfig:
    """Return the loaded config for path, loading and caching if necessary.

    Configs are cached per resolved path; repeated calls return the cached
    instance without re-reading the YAML file.

    THREAD SAFETY: This function is thread-safe.
    """
    key = _get_config_path(path=path)
    with _CACHE_LOCK:
        if key not in _LOADER_CACHE:
            _LOADER_CACHE[key] = load_config(path=path)
        return _LOADER_CACHE[key]


def clear_config_cache() -> None:
    """Clear all cached configurations.

    All subsequent calls to get_config() will reload from disk.
    """
    with _CACHE_LOCK:
        _LOADER_CACHE.clear()
