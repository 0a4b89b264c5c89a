"""Zoom and drawing-surface size for the canvas."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Point = Tuple[float, float]

MIN_ZOOM = 0.5
MAX_ZOOM = 2.0
ZOOM_STEP = 0.1


@dataclass
class ViewState:
    zoom: float = 1.0
    width: int = 800
    height: int = 600

    def __post_init__(self) -> None:
        self.zoom = self._clamp(self.zoom)

    @staticmethod
    def _clamp(value: float) -> float:
        # Two decimals keeps repeated 0.1 steps on exact tenths.
        return round(max(MIN_ZOOM, min(MAX_ZOOM, float(value))), 2)

    def set_zoom(self, value: float) -> float:
        self.zoom = self._clamp(value)
        return self.zoom

    def zoom_in(self) -> float:
        return self.set_zoom(self.zoom + ZOOM_STEP)

    def zoom_out(self) -> float:
        return self.set_zoom(self.zoom - ZOOM_STEP)

    @property
    def zoom_percent(self) -> int:
        return int(round(self.zoom * 100))

    @property
    def dimensions(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def resize(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"Invalid canvas size {width}x{height}")
        self.width = int(width)
        self.height = int(height)

    def to_model(self, x: float, y: float) -> Point:
        return (x / self.zoom, y / self.zoom)

    def to_device(self, x: float, y: float) -> Point:
        return (x * self.zoom, y * self.zoom)

