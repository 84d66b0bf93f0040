"""Two-player tic-tac-toe on a text terminal."""

import argparse
import re
import sys
from collections import deque
from dataclasses import dataclass, field

from pocketapps.terminal import clear_screen

_TOKENS = ("X", "O")
_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)
_INTEGER = re.compile(r"[+-]?\d+")
_BLANK_ROW = "    |    |    \n"
_DIVIDER = "____|____|____\n"


class PositionError(ValueError):
    """Raised when a mark cannot go on the chosen square."""


@dataclass
class Board:
    """A 3x3 board whose free squares show their numbers 1 to 9."""

    cells: list[str] = field(default_factory=lambda: [str(n) for n in range(1, 10)])

    def place(self, position, token):
        """Put *token* ('X' or 'O') on square *position* (1-9)."""
        if token not in _TOKENS:
            raise ValueError(f"token must be 'X' or 'O', not {token!r}")
        if not 1 <= position <= 9:
            raise PositionError("Invalid input! Choose a position between 1 and 9.")
        index = position - 1
        if self.cells[index] in _TOKENS:
            raise PositionError("Position already taken! Try again.")
        self.cells[index] = token

    def has_winner(self):
        """True if any row, column or diagonal holds three equal marks."""
        return any(self.cells[a] == self.cells[b] == self.cells[c] for a, b, c in _LINES)

    def is_full(self):
        """True if every square holds a mark."""
        return all(cell in _TOKENS for cell in self.cells)

    def render(self):
        """Return the board drawn as text."""
        parts = []
        for start in (0, 3, 6):
            a, b, c = self.cells[start:start + 3]
            parts.append(_BLANK_ROW)
            parts.append(f"  {a} | {b}  | {c} \n")
            parts.append(_DIVIDER if start < 6 else _BLANK_ROW)
        return "".join(parts)


class _Tokens:
    """Whitespace-separated words read line by line from a text stream."""

    def __init__(self, stream):
        self._stream = stream
        self._pending = deque()

    def next(self):
        while not self._pending:
            line = self._stream.readline()
            if not line:
                return None
            self._pending.extend(line.split())
        return self._pending.popleft()


def _read_line(stream):
    return stream.readline().rstrip("\r\n")


def play(input_stream=None, output_stream=None, clear=None):
    """Play one game; return the winner's name, or None on a draw."""
    source = sys.stdin if input_stream is None else input_stream
    out = sys.stdout if output_stream is None else output_stream
    clear = clear_screen if clear is None else clear

    def say(text):
        out.write(text)
        out.flush()

    say("____________________________________________\n\n\n")
    say("Enter the name of the first player (X): ")
    first = _read_line(source)
    say("Enter the name of the second player (O): ")
    second = _read_line(source)
    names = {"X": first, "O": second}

    tokens = _Tokens(source)
    board = Board()
    token = "X"

    def take_turn():
        while True:
            say(f"{names[token]}'s turn ({token}), choose a position (1-9): ")
            word = tokens.next()
            if word is None:
                return False
            position = int(word) if _INTEGER.fullmatch(word) else 0
            try:
                board.place(position, token)
            except PositionError as err:
                say(f"{err}\n")
            else:
                return True

    while True:
        clear()
        say(board.render())
        if not take_turn():
            return None
        if board.has_winner():
            clear()
            say(board.render())
            say(f"{names[token]} wins! 🎉\n")
            return names[token]
        if board.is_full():
            clear()
            say(board.render())
            say("It's a draw! 🤝\n")
            return None
        token = "O" if token == "X" else "X"


def main(argv=None):
    """Start a game of tic-tac-toe on the terminal."""
    parser = argparse.ArgumentParser(
        prog="tictactoe",
        description="Play tic-tac-toe for two players.",
    )
    parser.parse_args(argv)
    play()
    return 0