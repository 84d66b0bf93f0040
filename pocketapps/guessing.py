"""Guess-the-number game played on a text terminal."""

import argparse
import random
import re
import sys
from collections import deque
from enum import Enum

from pocketapps.terminal import border, clear_screen

_INTEGER = re.compile(r"[+-]?\d+")

_CELEBRATION = (
    "\nCongratulations! You guessed the secret number!\n"
    "You are the winner!\n"
    "\n" + border(50) + "\n"
    "          WELL DONE!          \n"
    + border(50) + "\n"
    "\nThanks for playing. Play again to challenge yourself!\n"
)

_DIFFICULTIES = {1: "Easy", 2: "Medium", 3: "Difficult"}


class Hint(Enum):
    """How a guess relates to the secret number."""

    CORRECT = "correct"
    SMALLER = "smaller"
    LARGER = "larger"


def check_guess(guess, secret):
    """Say whether *secret* equals, is smaller than or is larger than *guess*."""
    if guess == secret:
        return Hint.CORRECT
    return Hint.SMALLER if guess > secret else Hint.LARGER


class _Tokens:
    """Whitespace-separated words read from a text stream on demand."""

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


def _to_int(token):
    return int(token) if _INTEGER.fullmatch(token) else None


def play(input_stream=None, output_stream=None, rng=None, clear=None):
    """Run the game until the player leaves; return the number of games won."""
    tokens = _Tokens(sys.stdin if input_stream is None else input_stream)
    out = sys.stdout if output_stream is None else output_stream
    rng = random.Random() if rng is None else rng
    clear = clear_screen if clear is None else clear

    def say(text):
        out.write(text)
        out.flush()

    def rule(length=60):
        say(border(length) + "\n")

    def farewell():
        say("\nExiting the game. Thanks for playing!\n")
        rule()

    wins = 0
    while True:
        clear()
        rule()
        say("\t\tWELCOME TO GUESS THE NUMBER GAME\n")
        rule()
        say("\nGuess a number between 1 and 100 until you find the secret number.\n")
        say("Good luck and have fun!\n")
        rule()
        say("\nChoose the difficulty level: \n")
        say("".join(f"{number} ➝ {name}\t" for number, name in _DIFFICULTIES.items()))
        say("0 ➝ Exit the game\n")
        rule()
        say("Enter your choice: ")

        token = tokens.next()
        if token is None:
            return wins
        choice = _to_int(token)
        if choice == 0:
            clear()
            rule()
            farewell()
            return wins
        if choice not in _DIFFICULTIES:
            say("\nInvalid choice! Please enter 0, 1, 2, or 3.\n")
            rule()
            continue

        secret = rng.randint(1, 100)
        clear()
        rule(70)
        say("\nStart guessing the secret number between 1 and 100\n")
        rule(70)

        while True:
            say("\nEnter your guess: ")
            token = tokens.next()
            if token is None:
                return wins
            guess = _to_int(token)
            if guess is None:
                say("\nInvalid input! Please enter a whole number.\n")
                continue
            hint = check_guess(guess, secret)
            if hint is Hint.CORRECT:
                break
            say(f"\nNo, {guess} is not the right number.\n")
            if hint is Hint.SMALLER:
                say("The secret number is smaller than your guess.\n")
            else:
                say("The secret number is larger than your guess.\n")
            rule(70)

        wins += 1
        say(_CELEBRATION)
        say("\nDo you want to play more? (y/n): ")
        answer = tokens.next()
        if answer is None or answer[0] not in "yY":
            farewell()
            return wins


def main(argv=None):
    """Start the guessing game on the terminal."""
    parser = argparse.ArgumentParser(
        prog="guess-the-number",
        description="Guess a secret number between 1 and 100.",
    )
    parser.parse_args(argv)
    play()
    return 0