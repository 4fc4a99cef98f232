"""Tests for the puzzle session."""

import logging

import numpy as np
import pytest

from jigsaw_board import Grid, MoveAttempt, PuzzleSession, Viewport
from jigsaw_board.config import Settings


@pytest.fixture
def session() -> PuzzleSession:
    """Fresh 4x4 session with a seeded scatter generator."""
    return PuzzleSession(settings=Settings(), rng=np.random.default_rng(2024))


class TestPieces:
    """Tests for the piece set of a session."""

    def test_sixteen_pieces_in_slot_order(self, session: PuzzleSession) -> None:
        assert [piece.id for piece in session.pieces] == [f"p{i}" for i in range(1, 17)]
        assert [piece.home_slot for piece in session.pieces] == list(range(16))
        assert session.piece("p7").label == "7"

    def test_edges_are_derived_from_home_slot(self, session: PuzzleSession) -> None:
        assert session.edges("p7") == Grid(4, 4).edges_of(1, 2)

    def test_custom_grid(self) -> None:
        session = PuzzleSession(grid=Grid(2, 3), settings=Settings())
        assert len(session.pieces) == 6
        assert session.view("p6").texture.width == 300

    def test_grid_from_settings(self) -> None:
        session = PuzzleSession(settings=Settings(ROWS=3, COLS=2))
        assert (session.grid.rows, session.grid.cols) == (3, 2)


class TestPlacementFlow:
    """End-to-end placement through the session."""

    def test_place_p7(self, session: PuzzleSession) -> None:
        assert session.attempt_place("p7", 6)
        assert session.tracker.placed["p7"] is True
        assert not session.attempt_place("p7", 2)
        assert session.tracker.placed["p7"] is True

    def test_move_event(self, session: PuzzleSession) -> None:
        assert not session.move(MoveAttempt(piece_id="p1", target_slot=3))
        assert session.move(MoveAttempt(piece_id="p1", target_slot=0))

    def test_complete_after_all_pieces(self, session: PuzzleSession, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="jigsaw_board.session"):
            for piece in session.pieces:
                assert not session.is_complete
                session.attempt_place(piece.id, piece.home_slot)

        assert session.is_complete
        completions = [record for record in caplog.records if "Puzzle complete" in record.message]
        assert len(completions) == 1


class TestScatterAndViews:
    """Tests for resize handling and per-piece render data."""

    def test_initial_scatter_is_at_origin(self, session: PuzzleSession) -> None:
        entry = session.view("p1").scatter
        assert entry is not None
        assert (entry.position.x, entry.position.y, entry.tilt) == (0, 0, 0)

    def test_resize_replaces_all_entries(self, session: PuzzleSession) -> None:
        viewport = Viewport.centered(1280, 800)
        first = session.resize(viewport)
        second = session.resize(viewport)
        assert set(first) == {piece.id for piece in session.pieces}
        assert first != second
        assert session.scatter_entries == second

    def test_resize_keeps_pieces_inside_viewport(self, session: PuzzleSession) -> None:
        viewport = Viewport.centered(1280, 800)
        size = session.piece_visual_size(viewport)
        assert size == pytest.approx(96 * 1.44)
        half_width = 640 - 48 - size / 2
        half_height = 400 - 48 - size / 2
        for entry in session.resize(viewport).values():
            assert abs(entry.position.x) <= half_width
            assert abs(entry.position.y) <= half_height

    def test_narrow_viewport_uses_compact_pieces(self, session: PuzzleSession) -> None:
        assert session.piece_visual_size(Viewport.centered(600, 900)) == pytest.approx(86 * 1.44)

    def test_unplaced_view(self, session: PuzzleSession) -> None:
        session.resize(Viewport.centered(1280, 800))
        view = session.view("p7")
        assert not view.placed
        assert view.slot is None
        assert view.scatter == session.scatter_entries["p7"]
        assert view.outline.startswith("M 0 0 ")
        assert view.outline.endswith(" Z")
        assert view.view_box == "-22 -22 144 144"
        assert (view.texture.x, view.texture.y) == (-200, -100)
        assert view.texture.id == "img-p7"
        assert view.mask.width == 144

    def test_placed_view(self, session: PuzzleSession) -> None:
        session.attempt_place("p7", 6)
        view = session.view("p7")
        assert view.placed
        assert view.slot == 6
        assert view.scatter is None

    def test_views_cover_every_piece(self, session: PuzzleSession) -> None:
        views = session.views()
        assert [view.id for view in views] == [piece.id for piece in session.pieces]

    def test_unknown_piece_view(self, session: PuzzleSession) -> None:
        with pytest.raises(KeyError):
            session.view("p99")
