from twenty48.components.board import Board
from twenty48.rendering.text_board import render_board_text


def test_empty_board_has_terminal_dimensions():
    lines = render_board_text(Board(size=4)).split("\n")
    assert len(lines) == 17
    assert all(len(line) == 29 for line in lines)
    assert lines[0] == "╔══════╤══════╤══════╤══════╗"
    assert lines[4] == "╟──────┼──────┼──────┼──────╢"
    assert lines[-1] == "╚══════╧══════╧══════╧══════╝"


def test_values_sit_on_the_middle_line_of_each_cell():
    board = Board.from_rows([
        [2, 0, 0, 2048],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 16],
    ])
    lines = render_board_text(board).split("\n")
    assert lines[2] == "║  2   │      │      │ 2048 ║"
    assert lines[1].strip("║").replace("│", "").strip() == ""
    assert "16" in lines[14]


def test_fresh_cells_are_marked():
    board = Board.from_rows([[4, 0], [0, 0]])
    text = render_board_text(board, fresh=[(0, 0)])
    assert "4*" in text
    assert "*" not in render_board_text(board)
