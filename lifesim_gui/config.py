"""View configuration loader and data models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

import yaml  # type: ignore[import-untyped]

from lifesim.core.exceptions import ConfigurationError

DEFAULT_VIEW_CONFIG = Path(__file__).parent / "view.yaml"

# RGBA, each channel 0..1
Color = tuple[float, float, float, float]


@dataclass(frozen=True)
class ViewConfig:
    title: str = "Life Board"
    position: tuple[float, float] = (10.0, 10.0)
    cell_size: float = 8.0
    live_color: Color = (1.0, 1.0, 1.0, 1.0)
    dead_color: Color = (0.8, 0.8, 1.0, 1.0)
    background_color: Color = (1.0, 1.0, 1.0, 1.0)
    grid_color: Color = (0.0, 0.0, 0.2, 1.0)
    grid_line_width: float = 0.0
    scale_mode: Literal["fit", "stretch", "none"] = "fit"

    def cell_rect(self, col: int, row: int) -> tuple[float, float, float, float]:
        """Scene rectangle (x, y, width, height) of the cell at (col, row)."""
        return (
            self.position[0] + col * self.cell_size,
            self.position[1] + row * self.cell_size,
            self.cell_size,
            self.cell_size,
        )


def _parse_color(key: str, value: Any) -> Color:
    if isinstance(value, (list, tuple)) and len(value) in (3, 4):
        channels = [float(v) for v in value]
        if len(channels) == 3:
            channels.append(1.0)
        if all(0.0 <= c <= 1.0 for c in channels):
            return (channels[0], channels[1], channels[2], channels[3])
    raise ConfigurationError(key, f"Invalid color value: {value}")


def _parse_position(value: Any) -> tuple[float, float]:
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return float(value[0]), float(value[1])
    raise ConfigurationError("position", f"Invalid position value: {value}")


def _parse_scale_mode(value: Any) -> Literal["fit", "stretch", "none"]:
    if value == "fit":
        return "fit"
    if value == "stretch":
        return "stretch"
    if value == "none":
        return "none"
    raise ConfigurationError("scale_mode", "must be 'fit', 'stretch' or 'none'")


def _parse_view(raw: dict[str, Any]) -> ViewConfig:
    defaults = ViewConfig()
    cell_size = float(raw.get("cell_size", defaults.cell_size))
    if cell_size <= 0:
        raise ConfigurationError("cell_size", "must be positive")
    grid_line_width = float(raw.get("grid_line_width", defaults.grid_line_width))
    if grid_line_width < 0:
        raise ConfigurationError("grid_line_width", "must be >= 0")

    colors = raw.get("colors") or {}
    return ViewConfig(
        title=str(raw.get("title", defaults.title)),
        position=_parse_position(raw.get("position", defaults.position)),
        cell_size=cell_size,
        live_color=_parse_color("live", colors.get("live", defaults.live_color)),
        dead_color=_parse_color("dead", colors.get("dead", defaults.dead_color)),
        background_color=_parse_color(
            "background", colors.get("background", defaults.background_color)
        ),
        grid_color=_parse_color("grid", colors.get("grid", defaults.grid_color)),
        grid_line_width=grid_line_width,
        scale_mode=_parse_scale_mode(raw.get("scale_mode", defaults.scale_mode)),
    )


def load_view_config(path: str | Path | None = None) -> ViewConfig:
    path = Path(path) if path is not None else DEFAULT_VIEW_CONFIG
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Failed to parse view config: {exc}") from exc
    if raw is None:
        return ViewConfig()
    if not isinstance(raw, dict):
        raise ConfigurationError("View config root must be a mapping")
    return _parse_view(raw)
