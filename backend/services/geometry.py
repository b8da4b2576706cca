"""Coordinate helpers shared by the HUD templates.

Every template draws into the same 1200x720 canvas centred on (600, 360).
All functions here are pure; coordinates are formatted with one decimal
place when they are written into markup (see ``fmt``).
"""
import math
from typing import NamedTuple, Tuple


CANVAS_WIDTH = 1200
CANVAS_HEIGHT = 720
CENTER_X = 600
CENTER_Y = 360


class Point(NamedTuple):
    x: float
    y: float

    def svg(self, sep: str = ",") -> str:
        """Format as ``x,y`` with one decimal place."""
        return f"{fmt(self.x)}{sep}{fmt(self.y)}"


def fmt(value: float) -> str:
    """One decimal place, the precision used for every computed coordinate."""
    text = f"{value:.1f}"
    # Avoid "-0.0" so output does not depend on float sign noise
    return "0.0" if text == "-0.0" else text


def polar_to_cartesian(
    angle: float,
    radius: float,
    cx: float = CENTER_X,
    cy: float = CENTER_Y,
    y_scale: float = 1.0,
) -> Point:
    """Convert polar coordinates around (cx, cy) to a canvas point.

    ``y_scale`` compresses the vertical axis; values below 1 turn circles
    into ellipses.
    """
    return Point(
        cx + math.cos(angle) * radius,
        cy + math.sin(angle) * radius * y_scale,
    )


def radial_point(
    index: int,
    count: int,
    base_radius: float = 200,
    modulation: float = 80,
    frequency: float = 0.7,
    y_scale: float = 0.7,
) -> Point:
    """Place node ``index`` of ``count`` on an oscillating elliptical orbit.

    The angle is ``2*pi*index/count``; the radius wobbles around
    ``base_radius`` by ``modulation * sin(index * frequency)``.
    """
    angle = (index / count) * math.pi * 2
    radius = base_radius + modulation * math.sin(index * frequency)
    return polar_to_cartesian(angle, radius, y_scale=y_scale)


def linear_x(index: int, start: float = 220, spacing: float = 190) -> float:
    """X coordinate of step ``index`` along a horizontal track."""
    return start + index * spacing


def wedge_vertices(
    angle: float,
    inner: float = 210,
    outer: float = 310,
    half_width: float = 0.16,
) -> Tuple[Point, Point, Point]:
    """Vertices of a radial shard pointing at the canvas centre.

    Returns (apex, base_a, base_b): the apex sits on the inner radius at
    ``angle``, the base vertices on the outer radius at ``angle +/- half_width``.
    """
    apex = polar_to_cartesian(angle, inner)
    base_a = polar_to_cartesian(angle + half_width, outer)
    base_b = polar_to_cartesian(angle - half_width, outer)
    return apex, base_a, base_b
