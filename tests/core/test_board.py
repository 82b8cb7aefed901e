import random

import pytest

from lifesim.core.board import NEIGHBOR_OFFSETS, Board
from lifesim.core.exceptions import ConfigurationError, GridBoundsError, PatternError
from lifesim.interfaces.board import CellState


class TestNeighborOffsets:
    def test_eight_distinct_offsets(self):
        assert len(NEIGHBOR_OFFSETS) == 8
        assert len(set(NEIGHBOR_OFFSETS)) == 8

    def test_offsets_exclude_origin(self):
        assert (0, 0) not in NEIGHBOR_OFFSETS
        assert all(dc in (-1, 0, 1) and dr in (-1, 0, 1) for dc, dr in NEIGHBOR_OFFSETS)


class TestConstruction:
    def test_new_board_is_all_dead(self, empty_board):
        assert empty_board.width == 6
        assert empty_board.height == 4
        assert empty_board.population == 0

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3), (2.5, 3), (True, 3)])
    def test_invalid_dimensions(self, width, height):
        with pytest.raises(ConfigurationError):
            Board(width, height)

    def test_random_is_reproducible_with_seed(self):
        a = Board.random(20, 15, rng=random.Random(42))
        b = Board.random(20, 15, rng=random.Random(42))
        assert a == b

    def test_random_covers_every_position(self):
        board = Board.random(7, 5, rng=random.Random(1))
        positions = {(c.col, c.row) for c in board.cells()}
        assert positions == {(col, row) for col in range(7) for row in range(5)}

    def test_random_is_roughly_half_alive(self):
        board = Board.random(100, 100, rng=random.Random(3))
        assert 4000 < board.population < 6000

    def test_random_without_rng(self):
        board = Board.random(4, 4)
        assert (board.width, board.height) == (4, 4)

    def test_from_cells(self):
        board = Board.from_cells(4, 3, [(0, 0), (3, 2)])
        assert board.live_positions() == {(0, 0), (3, 2)}

    def test_from_cells_rejects_off_grid(self):
        with pytest.raises(GridBoundsError):
            Board.from_cells(4, 3, [(4, 0)])
        with pytest.raises(GridBoundsError):
            Board.from_cells(4, 3, [(-1, 0)])


class TestLookup:
    def test_is_alive_off_grid_raises(self, blinker_board):
        with pytest.raises(GridBoundsError) as exc_info:
            blinker_board.is_alive(5, 0)
        assert exc_info.value.details["position"] == (5, 0)

    def test_live_neighbors(self, blinker_board):
        assert blinker_board.live_neighbors(2, 2) == 2
        assert blinker_board.live_neighbors(2, 1) == 3
        assert blinker_board.live_neighbors(0, 0) == 0

    def test_live_neighbors_off_grid_raises(self, blinker_board):
        with pytest.raises(GridBoundsError):
            blinker_board.live_neighbors(-1, 2)

    def test_corner_has_at_most_three_neighbors(self):
        full = Board.from_cells(3, 3, [(c, r) for c in range(3) for r in range(3)])
        assert full.live_neighbors(0, 0) == 3
        assert full.live_neighbors(2, 2) == 3
        assert full.live_neighbors(1, 0) == 5
        assert full.live_neighbors(1, 1) == 8

    def test_no_wraparound_from_opposite_corner(self):
        # Only the far corners are alive; negative offsets from (0, 0)
        # must not reach them.
        board = Board.from_cells(4, 4, [(3, 3), (3, 0), (0, 3)])
        assert board.live_neighbors(0, 0) == 0


class TestNext:
    def test_preserves_dimensions(self):
        board = Board.random(13, 7, rng=random.Random(5))
        successor = board.next()
        assert (successor.width, successor.height) == (13, 7)

    def test_is_pure(self):
        board = Board.random(16, 16, rng=random.Random(11))
        before = board.to_text()
        first = board.next()
        second = board.next()
        assert first == second
        assert first is not board
        assert board.to_text() == before

    def test_blinker_oscillates(self, blinker_board, blinker_vertical_board):
        after_one = blinker_board.next()
        assert after_one == blinker_vertical_board
        assert after_one.live_positions() == {(2, 1), (2, 2), (2, 3)}
        assert after_one.next() == blinker_board

    def test_empty_board_stays_empty(self, empty_board):
        board = empty_board
        for _ in range(5):
            board = board.next()
            assert board.population == 0

    def test_isolated_cell_dies(self):
        board = Board.from_cells(5, 5, [(2, 2)])
        assert board.next().population == 0

    def test_block_is_still_life(self):
        board = Board.from_cells(4, 4, [(1, 1), (2, 1), (1, 2), (2, 2)])
        assert board.next() == board

    @pytest.mark.parametrize("neighbors,expected", [(0, False), (1, False), (2, True), (3, True), (4, False), (5, False)])
    def test_survival_rule(self, neighbors, expected):
        ring = [(0, 0), (1, 0), (2, 0), (0, 1), (2, 1), (0, 2), (1, 2), (2, 2)]
        board = Board.from_cells(3, 3, [(1, 1), *ring[:neighbors]])
        assert board.next().is_alive(1, 1) is expected

    @pytest.mark.parametrize("neighbors,expected", [(0, False), (2, False), (3, True), (4, False), (6, False)])
    def test_birth_rule(self, neighbors, expected):
        ring = [(0, 0), (1, 0), (2, 0), (0, 1), (2, 1), (0, 2), (1, 2), (2, 2)]
        board = Board.from_cells(3, 3, ring[:neighbors])
        assert board.next().is_alive(1, 1) is expected

    def test_reads_only_previous_generation(self):
        # Updating in place row by row would kill (0, 0) before (1, 0) and
        # (1, 1) are evaluated, leaving nothing alive.
        board = Board.from_cells(3, 3, [(0, 0), (1, 0), (2, 0)])
        assert board.next().live_positions() == {(1, 0), (1, 1)}


class TestSnapshot:
    def test_cells_yields_every_position_once(self, blinker_board):
        states = list(blinker_board.cells())
        assert len(states) == 25
        assert len({(s.col, s.row) for s in states}) == 25
        assert all(isinstance(s, CellState) for s in states)

    def test_iteration_matches_cells(self, blinker_board):
        assert list(blinker_board) == list(blinker_board.cells())

    def test_iteration_does_not_mutate(self, blinker_board):
        before = blinker_board.live_positions()
        for _ in blinker_board:
            pass
        assert blinker_board.live_positions() == before

    def test_live_states(self, blinker_board):
        live = {(s.col, s.row) for s in blinker_board.cells() if s.alive}
        assert live == {(1, 2), (2, 2), (3, 2)}


class TestText:
    def test_to_text(self):
        board = Board.from_cells(3, 2, [(0, 0), (2, 1)])
        assert board.to_text() == "X _ _\n_ _ X"

    def test_to_text_custom_glyphs(self):
        board = Board.from_cells(2, 1, [(1, 0)])
        assert board.to_text(live="O", dead=".") == ". O"

    def test_from_text_reproduces_board(self):
        board = Board.random(9, 6, rng=random.Random(8))
        assert Board.from_text(board.to_text()) == board

    def test_from_text_rejects_unknown_glyph(self):
        with pytest.raises(PatternError):
            Board.from_text("X?X")


def test_equality_and_repr(blinker_board):
    assert blinker_board != Board(5, 5)
    assert blinker_board != Board.from_cells(6, 5, [(1, 2), (2, 2), (3, 2)])
    assert (blinker_board == "board") is False
    assert repr(blinker_board) == "Board(width=5, height=5, population=3)"
