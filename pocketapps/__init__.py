"""Small terminal programs: number guessing, a calculator, tic-tac-toe and a to-do list."""

__version__ = "0.1.0"