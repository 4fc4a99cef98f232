"""Piece outline generation.

Outlines live in a normalized cell of ``cell_size`` units (100 by default),
with a margin of ``tab_radius`` on every side for protruding tabs. Each side
is either a straight line or a straight run, a semicircular arc through the
edge midpoint and another straight run back to the corner.
"""

import math
from dataclasses import dataclass
from typing import List, Tuple, Union

import numpy as np

from .grid import EdgeSet, EdgeType

Point = Tuple[float, float]


def _fmt(value: float) -> str:
    """Format a coordinate for SVG path data (no trailing ``.0``)."""
    return f"{value:g}"


@dataclass(frozen=True)
class MoveTo:
    """Start of the path."""

    x: float
    y: float

    def to_svg(self) -> str:
        return f"M {_fmt(self.x)} {_fmt(self.y)}"


@dataclass(frozen=True)
class LineTo:
    """Straight segment to (x, y)."""

    x: float
    y: float

    def to_svg(self) -> str:
        return f"L {_fmt(self.x)} {_fmt(self.y)}"


@dataclass(frozen=True)
class ArcTo:
    """Semicircular arc to (x, y).

    ``sweep`` follows the SVG convention: 1 turns in the positive angle
    direction, which is clockwise on a y-down screen.
    """

    radius: float
    sweep: int
    x: float
    y: float

    def to_svg(self) -> str:
        r = _fmt(self.radius)
        return f"A {r} {r} 0 0 {self.sweep} {_fmt(self.x)} {_fmt(self.y)}"


@dataclass(frozen=True)
class ClosePath:
    """Closes the path."""

    def to_svg(self) -> str:
        return "Z"


Segment = Union[MoveTo, LineTo, ArcTo, ClosePath]


@dataclass(frozen=True)
class PiecePath:
    """Closed outline of a single piece."""

    segments: Tuple[Segment, ...]

    @property
    def start(self) -> Point:
        first = self.segments[0] if self.segments else None
        if not isinstance(first, MoveTo):
            raise ValueError("Path must start with a MoveTo segment")
        return (first.x, first.y)

    @property
    def end(self) -> Point:
        """Last point reached by a drawing segment."""
        for segment in reversed(self.segments):
            if isinstance(segment, (MoveTo, LineTo, ArcTo)):
                return (segment.x, segment.y)
        raise ValueError("Path has no drawing segments")

    @property
    def is_closed(self) -> bool:
        if not isinstance(self.segments[-1], ClosePath):
            return False
        (x0, y0), (x1, y1) = self.start, self.end
        return math.isclose(x0, x1, abs_tol=1e-9) and math.isclose(y0, y1, abs_tol=1e-9)

    def to_svg(self) -> str:
        """Serialize to SVG path data, e.g. ``"M 0 0 L 28 0 A 22 22 0 0 1 72 0 ..."``."""
        return " ".join(segment.to_svg() for segment in self.segments)

    def to_polygon(self, points_per_arc: int = 24) -> np.ndarray:
        """Sample the outline into a polygon.

        Args:
            points_per_arc: Number of points generated along each arc.

        Returns:
            Array of shape (N, 2). The last point equals the first.
        """
        points: List[Point] = []
        current: Point = self.start

        for segment in self.segments:
            if isinstance(segment, (MoveTo, LineTo)):
                current = (segment.x, segment.y)
                points.append(current)
            elif isinstance(segment, ArcTo):
                points.extend(_sample_arc(current, segment, points_per_arc))
                current = (segment.x, segment.y)

        return np.array(points, dtype=float)

    def contains(self, x: float, y: float, points_per_arc: int = 24) -> bool:
        """Even-odd test of whether (x, y) lies inside the outline."""
        polygon = self.to_polygon(points_per_arc)
        x1, y1 = polygon[:-1, 0], polygon[:-1, 1]
        x2, y2 = polygon[1:, 0], polygon[1:, 1]

        crosses = (y1 > y) != (y2 > y)
        with np.errstate(divide="ignore", invalid="ignore"):
            x_at_y = x1 + (y - y1) * (x2 - x1) / (y2 - y1)

        return bool(np.count_nonzero(crosses & (x < x_at_y)) % 2 == 1)


def _sample_arc(start: Point, arc: ArcTo, num_points: int) -> List[Point]:
    """Sample a semicircle from ``start`` to the arc end, excluding ``start``."""
    cx = (start[0] + arc.x) / 2
    cy = (start[1] + arc.y) / 2
    radius = math.hypot(arc.x - cx, arc.y - cy)
    start_angle = math.atan2(start[1] - cy, start[0] - cx)
    direction = 1.0 if arc.sweep == 1 else -1.0

    angles = start_angle + direction * math.pi * np.linspace(0.0, 1.0, num_points + 1)[1:]
    xs = cx + radius * np.cos(angles)
    ys = cy + radius * np.sin(angles)

    points = [(float(px), float(py)) for px, py in zip(xs, ys)]
    # Snap the final sample onto the exact endpoint
    points[-1] = (arc.x, arc.y)
    return points


def _corners(cell_size: float) -> List[Point]:
    """Cell corners in clockwise order, starting and ending at the top-left."""
    return [(0.0, 0.0), (cell_size, 0.0), (cell_size, cell_size), (0.0, cell_size), (0.0, 0.0)]


def _edge_segments(start: Point, end: Point, edge: EdgeType, cell_size: float, tab_radius: float) -> List[Segment]:
    """Segments for one side, traversed from ``start`` to ``end``."""
    if edge == EdgeType.FLAT:
        return [LineTo(*end)]

    def along(distance: float) -> Point:
        ux = (end[0] - start[0]) / cell_size
        uy = (end[1] - start[1]) / cell_size
        return (start[0] + ux * distance, start[1] + uy * distance)

    near = along(cell_size / 2 - tab_radius)
    far = along(cell_size / 2 + tab_radius)

    # Clockwise traversal keeps the outside on the left of the travel
    # direction, so a tab always sweeps clockwise and a blank counter-clockwise.
    sweep = 1 if edge == EdgeType.TAB else 0

    return [LineTo(*near), ArcTo(tab_radius, sweep, *far), LineTo(*end)]


def build_outline(edges: EdgeSet, cell_size: float = 100.0, tab_radius: float = 22.0) -> PiecePath:
    """Build the closed outline of a piece.

    The path starts at the top-left corner and visits the top, right,
    bottom and left sides in that order. ``tab_radius`` must stay below half
    of ``cell_size``; larger values make neighbouring arcs overlap.

    Args:
        edges: Edge codes of the piece.
        cell_size: Side length of the cell in normalized units.
        tab_radius: Radius of tab and blank arcs.

    Returns:
        PiecePath starting and ending at (0, 0).
    """
    corners = _corners(cell_size)
    segments: List[Segment] = [MoveTo(*corners[0])]

    for side, edge in enumerate(edges.as_tuple()):
        segments.extend(_edge_segments(corners[side], corners[side + 1], edge, cell_size, tab_radius))

    segments.append(ClosePath())
    return PiecePath(tuple(segments))


def view_box(cell_size: float = 100.0, tab_radius: float = 22.0) -> str:
    """SVG viewBox covering the cell plus the tab margin."""
    size = cell_size + tab_radius * 2
    return f"{_fmt(-tab_radius)} {_fmt(-tab_radius)} {_fmt(size)} {_fmt(size)}"


def svg_scale(cell_size: float = 100.0, tab_radius: float = 22.0) -> float:
    """Scale of the drawn piece relative to its slot, tab margin included."""
    return (cell_size + tab_radius * 2) / cell_size
