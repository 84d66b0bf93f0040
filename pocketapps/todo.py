"""A to-do list manager for the terminal."""

import argparse
import sys
from dataclasses import dataclass, field

from pocketapps.terminal import clear_screen

_RULE = "__________________________________________"

_MENU = (
    f"\n{_RULE}\n"
    "           TO-DO LIST MANAGER            \n"
    f"{_RULE}\n"
    "1. Add Task\n"
    "2. View Tasks\n"
    "3. Mark Task as Completed\n"
    "4. Remove Task\n"
    "0. Exit\n"
    f"{_RULE}\n"
    "Enter your choice: "
)


@dataclass
class Task:
    """One entry of the list."""

    description: str
    completed: bool = False

    @property
    def status(self):
        return "Completed" if self.completed else "Pending"


@dataclass
class TodoList:
    """Tasks kept in the order they were added, numbered from 1."""

    tasks: list[Task] = field(default_factory=list)

    def __len__(self):
        return len(self.tasks)

    def __iter__(self):
        return iter(self.tasks)

    def _index(self, number):
        if not 1 <= number <= len(self.tasks):
            raise IndexError("Invalid task number.")
        return number - 1

    def add(self, description):
        """Append a pending task and return it."""
        task = Task(description)
        self.tasks.append(task)
        return task

    def complete(self, number):
        """Mark task *number* as completed and return it."""
        task = self.tasks[self._index(number)]
        task.completed = True
        return task

    def remove(self, number):
        """Remove task *number* and return it."""
        return self.tasks.pop(self._index(number))

    def render(self):
        """Return the task list drawn as text."""
        if not self.tasks:
            return "\nNo tasks in the list.\n"
        lines = "".join(
            f"{number}. {task.description} [{task.status}]\n"
            for number, task in enumerate(self.tasks, start=1)
        )
        return (
            f"\n{_RULE}\n"
            "                TASK LIST                  \n"
            f"{_RULE}\n"
            f"{lines}"
            f"{_RULE}\n"
        )


def _parse_int(line):
    words = line.split()
    if not words:
        return None
    try:
        return int(words[0])
    except ValueError:
        return None


def run(input_stream=None, output_stream=None, clear=None):
    """Run the menu until the user exits; return the final list."""
    source = sys.stdin if input_stream is None else input_stream
    out = sys.stdout if output_stream is None else output_stream
    clear = clear_screen if clear is None else clear
    todo = TodoList()

    def say(text):
        out.write(text)
        out.flush()

    def pause():
        say("\nPress ENTER to continue...")
        source.readline()

    def pick(action, prompt, done, empty):
        if not todo.tasks:
            say(empty)
            return
        say(todo.render())
        say(prompt)
        number = _parse_int(source.readline())
        try:
            action(0 if number is None else number)
        except IndexError:
            say("\nInvalid task number.\n")
        else:
            say(done)

    while True:
        clear()
        say(_MENU)
        line = source.readline()
        if not line:
            return todo
        choice = _parse_int(line)

        if choice == 1:
            say("\nEnter task description: ")
            todo.add(source.readline().rstrip("\r\n"))
            say("\nTask added successfully!\n")
        elif choice == 2:
            clear()
            say(todo.render())
        elif choice == 3:
            pick(
                todo.complete,
                "\nEnter task number to mark as completed: ",
                "\nTask marked as completed!\n",
                "\nNo tasks to mark as completed.\n",
            )
        elif choice == 4:
            pick(
                todo.remove,
                "\nEnter task number to remove: ",
                "\nTask removed successfully!\n",
                "\nNo tasks to remove.\n",
            )
        elif choice == 0:
            say("\nExiting the To-Do List Manager. Goodbye!\n")
            return todo
        else:
            say("\nInvalid choice! Please try again.\n")
        pause()


def main(argv=None):
    """Start the to-do list manager on the terminal."""
    parser = argparse.ArgumentParser(
        prog="todo",
        description="Keep a simple list of tasks.",
    )
    parser.parse_args(argv)
    run()
    return 0