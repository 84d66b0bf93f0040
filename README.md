# pocketapps

Four small interactive programs for the terminal.

## Installing

    pip install .

To install the test dependencies and run the test suite:

    pip install ".[test]"
    pytest

## Programs

Each command clears the screen with the system's `clear` command (`cls` on Windows) while it runs. Each one accepts `--help` and takes no other options.

### pocket-guess

    pocket-guess

This game picks a secret number between 1 and 100. First choose a difficulty: 1, 2 or 3, or 0 to quit. Then keep guessing. After each wrong guess the game says whether the secret number is smaller or larger than your guess. An entry that is not a whole number is rejected and you are asked again. When you find the number, the game asks whether you want to play again. An answer that starts with `y` or `Y` starts a new round.

### pocket-calc

    pocket-calc

Enter two numbers and an operation (`+`, `-`, `*` or `/`) to get the result. The result is shown with six significant digits. If an entry is not a number, you are asked to enter it again. Division by zero and unknown operations are reported, and no result is given.

### pocket-tictactoe

    pocket-tictactoe

A tic-tac-toe game for two players at one keyboard. Each player enters a name, then the players take turns picking a square from 1 to 9. If a square is already taken or out of range, the same player is asked again. The game ends with a win or a draw.

### pocket-todo

    pocket-todo

A to-do list menu. You can add tasks, view them, mark a task as completed by its number, and remove a task. Choose 0 to exit.

## Using the pieces from Python

Each program's logic can be called directly:

```python
from pocketapps.calculator import calculate, format_number
from pocketapps.guessing import check_guess
from pocketapps.tictactoe import Board
from pocketapps.todo import TodoList

format_number(calculate(7, 2, "/"))   # '3.5'
check_guess(40, 42)                   # Hint.LARGER

board = Board()
for position in (1, 4, 2, 5, 3):
    board.place(position, "X" if position in (1, 2, 3) else "O")
board.has_winner()                    # True

todo = TodoList()
todo.add("water the plants")
todo.complete(1)
print(todo.render())
```

- `pocketapps.calculator.calculate` raises `CalculatorError` (a `ValueError`) for division by zero or an unknown operation.
- `pocketapps.guessing.check_guess` returns a `Hint`: `CORRECT`, `SMALLER` or `LARGER`, telling how the secret number compares with the guess.
- `pocketapps.tictactoe.Board.place` raises `PositionError` (a `ValueError`) for a square outside 1 to 9 or one that is already taken. `Board.is_full` and `Board.render` report and draw the board.
- `pocketapps.todo.TodoList` numbers tasks from 1. `complete` and `remove` raise `IndexError` for a number that is not in the list. Each entry is a `Task` with `description` and `completed`.
- `pocketapps.terminal` provides `border(length, symbol)` and `clear_screen()`.

The functions that drive whole sessions accept input and output streams and a `clear` callable, so you can run a session from a script or a test:

- `guessing.play(input_stream, output_stream, rng, clear)` returns the number of games won. `rng` is any object with a `randint` method, such as `random.Random(seed)`.
- `calculator.run(input_stream, output_stream, clear)` returns the result, or `None` if there was none.
- `tictactoe.play(input_stream, output_stream, clear)` returns the winner's name, or `None` for a draw.
- `todo.run(input_stream, output_stream, clear)` returns the final `TodoList`.

Each of these also stops when its input runs out.

## Limitations

- The difficulty level in `pocket-guess` is asked for but does not change the game. Every level uses the same range and allows unlimited guesses.
- `pocket-todo` keeps its tasks only in memory. Nothing is saved to disk, and the list is gone when the program exits.
- `pocket-calc` performs a single calculation per run.