"""Placement and completion tracking."""

import logging
from typing import Dict, Iterable, List

from .models import Piece

logger = logging.getLogger(__name__)


class PlacementTracker:
    """Tracks which pieces have been placed in their home slot.

    Every piece starts unplaced and becomes placed at most once. Placed is
    terminal: nothing moves a piece back out of its slot.
    """

    def __init__(self, pieces: Iterable[Piece]):
        """Initialize the tracker with every piece unplaced.

        Args:
            pieces: Pieces of the puzzle, ids must be unique.
        """
        self._pieces: Dict[str, Piece] = {}
        for piece in pieces:
            if piece.id in self._pieces:
                raise ValueError(f"Duplicate piece id {piece.id!r}")
            self._pieces[piece.id] = piece
        self._placed: Dict[str, bool] = {piece_id: False for piece_id in self._pieces}

    def attempt_place(self, piece_id: str, target_slot: int) -> bool:
        """Try to drop a piece into a slot.

        Unknown pieces, pieces that are already placed and wrong slots are
        ignored.

        Returns:
            True if the piece went from unplaced to placed.
        """
        piece = self._pieces.get(piece_id)
        if piece is None:
            logger.debug("Ignoring move of unknown piece %r", piece_id)
            return False
        if self._placed[piece_id]:
            logger.debug("Ignoring move of already placed piece %s", piece_id)
            return False
        if target_slot != piece.home_slot:
            logger.debug("Ignoring move of %s to slot %s (home is %d)", piece_id, target_slot, piece.home_slot)
            return False

        self._placed[piece_id] = True
        return True

    def is_placed(self, piece_id: str) -> bool:
        return self._placed.get(piece_id, False)

    @property
    def placed(self) -> Dict[str, bool]:
        """Copy of the placement state keyed by piece id."""
        return dict(self._placed)

    def unplaced_ids(self) -> List[str]:
        return [piece_id for piece_id, placed in self._placed.items() if not placed]

    @property
    def is_complete(self) -> bool:
        return all(self._placed.values())
