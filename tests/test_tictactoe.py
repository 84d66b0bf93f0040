import io

import pytest

from pocketapps.tictactoe import Board, PositionError, play

DRAW_MOVES = [("X", 1), ("O", 2), ("X", 3), ("O", 5), ("X", 4), ("O", 6), ("X", 8), ("O", 7), ("X", 9)]


def play_with(text):
    out = io.StringIO()
    winner = play(io.StringIO(text), out, lambda: None)
    return winner, out.getvalue()


def test_new_board_shows_numbers():
    rendered = Board().render()
    assert "  1 | 2  | 3 \n" in rendered
    assert "  7 | 8  | 9 \n" in rendered
    assert rendered.count("____|____|____\n") == 2


def test_place_marks_the_square():
    board = Board()
    board.place(5, "X")
    assert "  4 | X  | 6 \n" in board.render()


def test_taken_square_is_rejected():
    board = Board()
    board.place(3, "O")
    with pytest.raises(PositionError, match="Position already taken"):
        board.place(3, "X")


@pytest.mark.parametrize("position", [0, 10, -1])
def test_out_of_range_position(position):
    with pytest.raises(PositionError, match="between 1 and 9"):
        Board().place(position, "X")


def test_unknown_token():
    with pytest.raises(ValueError, match="token must be"):
        Board().place(1, "Z")


@pytest.mark.parametrize(
    "positions",
    [(1, 2, 3), (4, 5, 6), (7, 8, 9), (1, 4, 7), (2, 5, 8), (3, 6, 9), (1, 5, 9), (3, 5, 7)],
)
def test_every_line_wins(positions):
    board = Board()
    for position in positions:
        board.place(position, "O")
    assert board.has_winner()


def test_draw_fills_board_without_winner():
    board = Board()
    for token, position in DRAW_MOVES:
        assert not board.is_full()
        board.place(position, token)
        assert not board.has_winner()
    assert board.is_full()


def test_play_first_player_wins():
    winner, output = play_with("Alice\nBob\n1\n4\n2\n5\n3\n")
    assert winner == "Alice"
    assert output.endswith("Alice wins! 🎉\n")
    assert "Bob's turn (O), choose a position (1-9): " in output


def test_play_second_player_wins():
    winner, output = play_with("Alice\nBob\n1\n4\n2\n5\n9\n6\n")
    assert winner == "Bob"
    assert "Bob wins! 🎉" in output


def test_play_rejects_taken_and_invalid_positions():
    winner, output = play_with("Alice\nBob\n1\n1\n12\nxyz\n4\n2\n5\n3\n")
    assert winner == "Alice"
    assert output.count("Position already taken! Try again.\n") == 1
    assert output.count("Invalid input! Choose a position between 1 and 9.\n") == 2


def test_play_draw():
    moves = "\n".join(str(position) for _, position in DRAW_MOVES)
    winner, output = play_with(f"Alice\nBob\n{moves}\n")
    assert winner is None
    assert output.endswith("It's a draw! 🤝\n")


def test_play_stops_at_end_of_input():
    winner, output = play_with("Alice\nBob\n1\n")
    assert winner is None
    assert "wins" not in output