"""Random non-overlapping layout of unplaced pieces.

Pieces are placed greedily by rejection sampling: each one tries up to
``max_attempts`` uniform candidates and keeps the first one far enough from
every piece placed before it. When the budget runs out the last candidate is
kept anyway, so a crowded viewport yields occasional overlaps rather than a
missing piece. The minimum separation is therefore not a hard guarantee.
"""

import logging
from typing import List, Optional, Tuple

import numpy as np

from .models import Position, ScatterEntry, Viewport
from .outline import svg_scale

logger = logging.getLogger(__name__)


def piece_size_for(
    viewport_width: float,
    piece_size: float = 96.0,
    compact_piece_size: float = 86.0,
    compact_breakpoint: float = 700.0,
) -> float:
    """Base piece size in pixels, smaller on narrow viewports."""
    return compact_piece_size if viewport_width <= compact_breakpoint else piece_size


def piece_visual_size(base_size: float, cell_size: float = 100.0, tab_radius: float = 22.0) -> float:
    """On-screen footprint of a piece including its tab margin."""
    return base_size * svg_scale(cell_size, tab_radius)


def _axis_range(extent: float, anchor: float, inset: float) -> Tuple[float, float]:
    """Valid center offsets along one axis, collapsed to the midpoint when empty."""
    low = inset - anchor
    high = extent - inset - anchor
    if low > high:
        mid = (low + high) / 2
        return mid, mid
    return low, high


def sampling_bounds(viewport: Viewport, piece_visual_size: float, padding: float) -> Tuple[float, float, float, float]:
    """Compute the rectangle of valid center offsets relative to the anchor.

    Args:
        viewport: Viewport metrics.
        piece_visual_size: On-screen footprint of a piece in pixels.
        padding: Margin kept free along every viewport edge.

    Returns:
        Tuple of (min_x, max_x, min_y, max_y).
    """
    inset = padding + piece_visual_size / 2
    min_x, max_x = _axis_range(viewport.width, viewport.anchor.x, inset)
    min_y, max_y = _axis_range(viewport.height, viewport.anchor.y, inset)
    return min_x, max_x, min_y, max_y


def scatter(
    viewport: Viewport,
    piece_visual_size: float,
    count: int,
    padding: float = 48.0,
    *,
    rng: Optional[np.random.Generator] = None,
    max_attempts: int = 600,
    min_distance_factor: float = 1.1,
    max_tilt: float = 14.0,
) -> List[ScatterEntry]:
    """Scatter ``count`` pieces across the viewport.

    Args:
        viewport: Viewport metrics.
        piece_visual_size: On-screen footprint of a piece in pixels.
        count: Number of pieces to place.
        padding: Margin kept free along every viewport edge.
        rng: Random generator (fresh OS entropy if None).
        max_attempts: Candidates tried per piece before giving up on separation.
        min_distance_factor: Minimum center distance as a multiple of ``piece_visual_size``.
        max_tilt: Tilts are drawn uniformly from [-max_tilt, max_tilt] degrees.

    Returns:
        Exactly ``count`` scatter entries, in piece order.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
    if rng is None:
        rng = np.random.default_rng()

    min_x, max_x, min_y, max_y = sampling_bounds(viewport, piece_visual_size, padding)
    min_distance = piece_visual_size * min_distance_factor
    logger.debug(
        "Scattering %d pieces in x=[%.1f, %.1f] y=[%.1f, %.1f], min distance %.1f",
        count,
        min_x,
        max_x,
        min_y,
        max_y,
        min_distance,
    )

    placed = np.empty((count, 2), dtype=float)
    entries: List[ScatterEntry] = []

    for index in range(count):
        accepted = placed[:index]
        for _ in range(max_attempts):
            x = rng.uniform(min_x, max_x)
            y = rng.uniform(min_y, max_y)
            tilt = rng.uniform(-max_tilt, max_tilt)
            distances = np.hypot(accepted[:, 0] - x, accepted[:, 1] - y)
            if np.all(distances >= min_distance):
                break
        else:
            logger.warning(
                "No clear position for piece %d after %d attempts, accepting a possible overlap",
                index,
                max_attempts,
            )

        placed[index] = (x, y)
        entries.append(ScatterEntry(position=Position(x=float(x), y=float(y)), tilt=float(tilt)))

    return entries
