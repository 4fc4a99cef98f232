"""Texture mapping of the source image onto individual pieces.

The source image is stretched over a tile of ``cols * cell_size`` by
``rows * cell_size`` units and the tile is shifted so that the sub-image of
the piece's cell lands on the piece's local 0..cell_size square. The tile is
larger than the piece on purpose: tabs reaching into a neighbour's area
still sample the matching image content before the outline clip is applied.
"""

from typing import List, Optional, Tuple

from PIL import Image, ImageDraw, ImageOps

from .grid import EdgeSet, Grid
from .models import MaskBounds, TexturePattern
from .outline import build_outline


def map_texture(grid: Grid, slot: int, cell_size: float = 100.0, piece_id: Optional[str] = None) -> TexturePattern:
    """Place the image tile for the piece whose home is ``slot``.

    Args:
        grid: Puzzle grid.
        slot: Linear slot index of the cell.
        cell_size: Side length of a cell in normalized units.
        piece_id: Optional piece id, used to name the pattern.

    Returns:
        TexturePattern with origin (-col * cell_size, -row * cell_size).
    """
    row, col = grid.cell_of(slot)
    return TexturePattern(
        id=f"img-{piece_id}" if piece_id is not None else None,
        x=-col * cell_size,
        y=-row * cell_size,
        width=grid.cols * cell_size,
        height=grid.rows * cell_size,
    )


def mask_bounds(tab_radius: float = 22.0, cell_size: float = 100.0) -> MaskBounds:
    """Rectangle covering the cell plus the tab margin on every side."""
    return MaskBounds(
        x=-tab_radius,
        y=-tab_radius,
        width=cell_size + tab_radius * 2,
        height=cell_size + tab_radius * 2,
    )


def create_outline_mask(
    polygon: List[Tuple[float, float]],
    width: int,
    height: int,
    antialias_scale: int = 4,
) -> Image.Image:
    """Create an anti-aliased mask for a polygon given in pixel coordinates.

    Renders at ``antialias_scale`` times the resolution and downsamples.
    """
    hi_res_mask = Image.new("L", (width * antialias_scale, height * antialias_scale), 0)
    draw = ImageDraw.Draw(hi_res_mask)

    scaled_polygon = [(x * antialias_scale, y * antialias_scale) for x, y in polygon]
    if len(scaled_polygon) >= 3:
        draw.polygon(scaled_polygon, fill=255)

    return hi_res_mask.resize((width, height), Image.Resampling.LANCZOS)


def render_piece(
    source_image: Image.Image,
    grid: Grid,
    slot: int,
    edges: Optional[EdgeSet] = None,
    cell_size: float = 100.0,
    tab_radius: float = 22.0,
    pixels_per_unit: float = 1.0,
    points_per_arc: int = 24,
) -> Image.Image:
    """Rasterize a piece the way the host draws it.

    The source image is cover-fitted onto the tile, the mask bounds window of
    the cell is cropped out of it and everything outside the piece outline
    is made transparent.

    Args:
        source_image: Full puzzle image.
        grid: Puzzle grid.
        slot: Home slot of the piece.
        edges: Edge codes of the piece (derived from ``slot`` if None).
        cell_size: Side length of a cell in normalized units.
        tab_radius: Radius of tab and blank arcs.
        pixels_per_unit: Output pixels per normalized unit.
        points_per_arc: Number of points sampled along each arc.

    Returns:
        Square RGBA image covering the mask bounds of the piece.
    """
    if edges is None:
        edges = grid.edges_for_slot(slot)

    pattern = map_texture(grid, slot, cell_size)
    bounds = mask_bounds(tab_radius, cell_size)

    tile_size = (round(pattern.width * pixels_per_unit), round(pattern.height * pixels_per_unit))
    tile = ImageOps.fit(source_image.convert("RGBA"), tile_size, Image.Resampling.LANCZOS)

    # Mask bounds window expressed in tile pixels; areas past the tile edge crop to transparent
    left = round((bounds.x - pattern.x) * pixels_per_unit)
    top = round((bounds.y - pattern.y) * pixels_per_unit)
    size = round(bounds.width * pixels_per_unit)
    window = tile.crop((left, top, left + size, top + size))

    outline = build_outline(edges, cell_size, tab_radius)
    polygon = [
        ((float(x) - bounds.x) * pixels_per_unit, (float(y) - bounds.y) * pixels_per_unit)
        for x, y in outline.to_polygon(points_per_arc)
    ]
    mask = create_outline_mask(polygon, size, size)

    result = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    result.paste(window, (0, 0), mask)
    return result
