"""RGBA colour with components in the range 0.0 to 1.0."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGBA colour."""

    r: float
    g: float
    b: float
    a: float

    @staticmethod
    def black() -> Color:
        return Color(0.0, 0.0, 0.0, 1.0)