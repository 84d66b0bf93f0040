"""A four-function calculator for the terminal."""

import argparse
import re
import sys
from collections import deque

from pocketapps.terminal import clear_screen

_NUMBER = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")

_OPERATIONS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": lambda a, b: a / b,
}


class CalculatorError(ValueError):
    """Raised when a calculation cannot be carried out."""


def calculate(first, second, operation):
    """Apply *operation* ('+', '-', '*' or '/') to two numbers."""
    try:
        apply = _OPERATIONS[operation]
    except KeyError:
        raise CalculatorError("Invalid operation. Please use +, -, *, or /.") from None
    if operation == "/" and second == 0:
        raise CalculatorError("Error: Division by zero is not allowed.")
    return apply(float(first), float(second))


def format_number(value):
    """Format a number with six significant digits, as a terminal shows it."""
    return f"{value:g}"


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

    def discard_line(self):
        self._pending.clear()


def _read_number(tokens, say):
    while True:
        token = tokens.next()
        if token is None:
            return None
        if _NUMBER.fullmatch(token):
            return float(token)
        say("Invalid input. Please enter a valid number: ")
        tokens.discard_line()


def run(input_stream=None, output_stream=None, clear=None):
    """Ask for two numbers and an operation; return the result or None."""
    tokens = _Tokens(sys.stdin if input_stream is None else input_stream)
    out = sys.stdout if output_stream is None else output_stream
    clear = clear_screen if clear is None else clear

    def say(text):
        out.write(text)
        out.flush()

    clear()
    say("========== Basic Calculator ==========\n")
    say("Enter the first number: ")
    first = _read_number(tokens, say)
    if first is None:
        return None
    say("Enter the second number: ")
    second = _read_number(tokens, say)
    if second is None:
        return None
    say("Choose an operation (+, -, *, /): ")
    token = tokens.next()
    if token is None:
        return None

    result = None
    try:
        result = calculate(first, second, token[0])
    except CalculatorError as err:
        say(f"{err}\n")
    else:
        say(f"Result: {format_number(result)}\n")
    say("=====================================\n")
    return result


def main(argv=None):
    """Start the calculator on the terminal."""
    parser = argparse.ArgumentParser(
        prog="calculator",
        description="Add, subtract, multiply or divide two numbers.",
    )
    parser.parse_args(argv)
    run()
    return 0