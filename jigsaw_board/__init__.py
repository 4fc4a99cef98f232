"""Jigsaw board - interlocking piece outlines, texture mapping, scatter layout and placement tracking.

This package exposes a jigsaw puzzle as pure data: outline paths, image tile
placements, scattered piece positions and placement state. Drawing and drag
handling are left to the host.
"""

from .grid import EdgeSet, EdgeType, Grid
from .models import MaskBounds, MoveAttempt, Piece, PieceView, Position, ScatterEntry, TexturePattern, Viewport
from .outline import ArcTo, ClosePath, LineTo, MoveTo, PiecePath, build_outline, svg_scale, view_box
from .placement import PlacementTracker
from .scatter import piece_size_for, piece_visual_size, sampling_bounds, scatter
from .session import PuzzleSession, create_pieces
from .texture import create_outline_mask, map_texture, mask_bounds, render_piece

__all__ = [
    # Grid
    "EdgeType",
    "EdgeSet",
    "Grid",
    # Models
    "Position",
    "Viewport",
    "ScatterEntry",
    "MoveAttempt",
    "Piece",
    "TexturePattern",
    "MaskBounds",
    "PieceView",
    # Outline
    "MoveTo",
    "LineTo",
    "ArcTo",
    "ClosePath",
    "PiecePath",
    "build_outline",
    "view_box",
    "svg_scale",
    # Texture
    "map_texture",
    "mask_bounds",
    "create_outline_mask",
    "render_piece",
    # Scatter
    "piece_size_for",
    "piece_visual_size",
    "sampling_bounds",
    "scatter",
    # Placement
    "PlacementTracker",
    "PuzzleSession",
    "create_pieces",
]
