"""Tests for placement and completion tracking."""

import pytest

from jigsaw_board import Grid, Piece, PlacementTracker, create_pieces


@pytest.fixture
def tracker() -> PlacementTracker:
    """Tracker for a 4x4 puzzle."""
    return PlacementTracker(create_pieces(Grid(4, 4)))


class TestAttemptPlace:
    """Tests for move attempts."""

    def test_starts_unplaced(self, tracker: PlacementTracker) -> None:
        assert not any(tracker.placed.values())
        assert len(tracker.unplaced_ids()) == 16
        assert not tracker.is_complete

    def test_home_slot_places_piece(self, tracker: PlacementTracker) -> None:
        assert tracker.attempt_place("p7", 6)
        assert tracker.is_placed("p7")
        assert tracker.placed["p7"] is True

    def test_wrong_slot_changes_nothing(self, tracker: PlacementTracker) -> None:
        before = tracker.placed
        assert not tracker.attempt_place("p7", 2)
        assert tracker.placed == before

    @pytest.mark.parametrize("slot", [-1, 16, 1000])
    def test_out_of_range_slot_is_ignored(self, tracker: PlacementTracker, slot: int) -> None:
        assert not tracker.attempt_place("p1", slot)
        assert not tracker.is_placed("p1")

    def test_unknown_piece_is_ignored(self, tracker: PlacementTracker) -> None:
        before = tracker.placed
        assert not tracker.attempt_place("p99", 0)
        assert tracker.placed == before
        assert not tracker.is_placed("p99")

    def test_placing_twice_is_idempotent(self, tracker: PlacementTracker) -> None:
        assert tracker.attempt_place("p7", 6)
        after_first = tracker.placed
        assert not tracker.attempt_place("p7", 6)
        assert tracker.placed == after_first

    def test_placed_piece_cannot_be_moved_away(self, tracker: PlacementTracker) -> None:
        tracker.attempt_place("p7", 6)
        tracker.attempt_place("p7", 2)
        assert tracker.is_placed("p7")

    def test_placed_returns_a_copy(self, tracker: PlacementTracker) -> None:
        snapshot = tracker.placed
        snapshot["p1"] = True
        assert not tracker.is_placed("p1")

    def test_duplicate_ids_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate"):
            PlacementTracker([Piece(id="a", home_slot=0, label="1"), Piece(id="a", home_slot=1, label="2")])


class TestCompletion:
    """Tests for the derived completion predicate."""

    def test_complete_only_after_every_piece(self, tracker: PlacementTracker) -> None:
        pieces = create_pieces(Grid(4, 4))
        for piece in pieces[:-1]:
            tracker.attempt_place(piece.id, piece.home_slot)
            assert not tracker.is_complete

        tracker.attempt_place(pieces[-1].id, pieces[-1].home_slot)
        assert tracker.is_complete
        assert tracker.unplaced_ids() == []

    def test_wrong_slots_never_complete(self, tracker: PlacementTracker) -> None:
        for piece in create_pieces(Grid(4, 4)):
            tracker.attempt_place(piece.id, (piece.home_slot + 1) % 16)
        assert not tracker.is_complete

    def test_empty_puzzle_is_complete(self) -> None:
        assert PlacementTracker([]).is_complete
