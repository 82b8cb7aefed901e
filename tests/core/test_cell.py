from lifesim.core.board import Board
from lifesim.core.cell import Cell


def test_cell_fields():
    cell = Cell(alive=True, col=3, row=1)
    assert cell.alive is True
    assert (cell.col, cell.row) == (3, 1)


def test_cell_coordinates_match_grid_position():
    board = Board(4, 3)
    for col in range(4):
        for row in range(3):
            cell = board.cell(col, row)
            assert (cell.col, cell.row) == (col, row)


def test_cell_lookup_returns_copy():
    board = Board.from_cells(3, 3, [(1, 1)])
    cell = board.cell(1, 1)
    cell.alive = False
    assert board.is_alive(1, 1)


def test_coordinates_survive_generations(blinker_board):
    board = blinker_board.next().next()
    for state in board.cells():
        cell = board.cell(state.col, state.row)
        assert (cell.col, cell.row) == (state.col, state.row)
