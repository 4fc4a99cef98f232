"""Puzzle session tying the grid, outlines, textures, scatter and placement together.

The session owns the only mutable state of a puzzle: the placement state and
the scatter entries. The host feeds it viewport changes and move attempts
and reads back one PieceView per piece.
"""

import logging
from typing import Dict, List, Optional

import numpy as np

from .config import Settings, get_settings
from .grid import EdgeSet, Grid
from .models import MoveAttempt, Piece, PieceView, Position, ScatterEntry, Viewport
from .outline import PiecePath, build_outline, svg_scale, view_box
from .placement import PlacementTracker
from .scatter import piece_size_for, piece_visual_size, scatter
from .texture import map_texture, mask_bounds

logger = logging.getLogger(__name__)


def create_pieces(grid: Grid) -> List[Piece]:
    """Create one piece per slot, ids ``p1``..``pN`` in slot order."""
    return [Piece(id=f"p{slot + 1}", home_slot=slot, label=str(slot + 1)) for slot in grid.slots()]


class PuzzleSession:
    """A single puzzle being solved."""

    def __init__(
        self,
        grid: Optional[Grid] = None,
        settings: Optional[Settings] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        """Initialize the session.

        Args:
            grid: Puzzle grid (ROWS x COLS from settings if None).
            settings: Settings to use (cached settings if None).
            rng: Random generator for scatter layouts (fresh OS entropy if None).
        """
        self.settings = settings if settings is not None else get_settings()
        self.grid = grid if grid is not None else Grid(self.settings.ROWS, self.settings.COLS)
        self.rng = rng if rng is not None else np.random.default_rng()

        self.pieces = create_pieces(self.grid)
        self._pieces_by_id: Dict[str, Piece] = {piece.id: piece for piece in self.pieces}
        self.tracker = PlacementTracker(self.pieces)

        origin = ScatterEntry(position=Position(x=0.0, y=0.0), tilt=0.0)
        self._scatter: Dict[str, ScatterEntry] = {piece.id: origin for piece in self.pieces}

    @property
    def is_complete(self) -> bool:
        return self.tracker.is_complete

    @property
    def scatter_entries(self) -> Dict[str, ScatterEntry]:
        return dict(self._scatter)

    def piece(self, piece_id: str) -> Piece:
        return self._pieces_by_id[piece_id]

    def edges(self, piece_id: str) -> EdgeSet:
        return self.grid.edges_for_slot(self.piece(piece_id).home_slot)

    def outline(self, piece_id: str) -> PiecePath:
        return build_outline(self.edges(piece_id), self.settings.CELL_SIZE, self.settings.TAB_RADIUS)

    def piece_visual_size(self, viewport: Viewport) -> float:
        """On-screen footprint of a piece for the given viewport."""
        base = piece_size_for(
            viewport.width,
            self.settings.PIECE_SIZE,
            self.settings.COMPACT_PIECE_SIZE,
            self.settings.COMPACT_BREAKPOINT,
        )
        return piece_visual_size(base, self.settings.CELL_SIZE, self.settings.TAB_RADIUS)

    def resize(self, viewport: Viewport) -> Dict[str, ScatterEntry]:
        """Recompute scatter entries for every piece after a viewport change.

        All entries are replaced as a unit. Entries of placed pieces are
        recomputed too but are never rendered.

        Returns:
            The new scatter entries keyed by piece id.
        """
        entries = scatter(
            viewport,
            self.piece_visual_size(viewport),
            len(self.pieces),
            self.settings.SCATTER_PADDING,
            rng=self.rng,
            max_attempts=self.settings.SCATTER_MAX_ATTEMPTS,
            min_distance_factor=self.settings.MIN_DISTANCE_FACTOR,
            max_tilt=self.settings.MAX_TILT,
        )
        self._scatter = {piece.id: entry for piece, entry in zip(self.pieces, entries)}
        return self.scatter_entries

    def attempt_place(self, piece_id: str, target_slot: int) -> bool:
        """Try to place a piece, see PlacementTracker.attempt_place."""
        if not self.tracker.attempt_place(piece_id, target_slot):
            return False

        logger.info("Placed piece %s in slot %d", piece_id, target_slot)
        if self.tracker.is_complete:
            logger.info("Puzzle complete: all %d pieces placed", len(self.pieces))
        return True

    def move(self, attempt: MoveAttempt) -> bool:
        return self.attempt_place(attempt.piece_id, attempt.target_slot)

    def view(self, piece_id: str) -> PieceView:
        """Build the render data of a single piece.

        Unplaced pieces carry their scatter entry, placed pieces carry their
        slot instead.
        """
        piece = self.piece(piece_id)
        placed = self.tracker.is_placed(piece_id)
        cell_size = self.settings.CELL_SIZE
        tab_radius = self.settings.TAB_RADIUS

        return PieceView(
            id=piece.id,
            label=piece.label,
            home_slot=piece.home_slot,
            placed=placed,
            outline=self.outline(piece_id).to_svg(),
            view_box=view_box(cell_size, tab_radius),
            svg_scale=svg_scale(cell_size, tab_radius),
            texture=map_texture(self.grid, piece.home_slot, cell_size, piece_id=piece.id),
            mask=mask_bounds(tab_radius, cell_size),
            scatter=None if placed else self._scatter[piece_id],
            slot=piece.home_slot if placed else None,
        )

    def views(self) -> List[PieceView]:
        return [self.view(piece.id) for piece in self.pieces]
