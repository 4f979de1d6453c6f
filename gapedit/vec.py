"""Two-dimensional vector."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Vec2:
    """A point or offset on the screen."""

    x: float = 0.0
    y: float = 0.0


def vec2(x: float, y: float) -> Vec2:
    """Build a vector from its two components."""
    return Vec2(float(x), float(y))


def vec2s(x: float) -> Vec2:
    """Build a vector with both components equal to ``x``."""
    return vec2(x, x)