import io

import pytest

from pocketapps.todo import Task, TodoList, run


def run_with(text):
    out = io.StringIO()
    todo = run(io.StringIO(text), out, lambda: None)
    return todo, out.getvalue()


def test_add_creates_pending_task():
    todo = TodoList()
    task = todo.add("Buy milk")
    assert len(todo) == 1
    assert task.description == "Buy milk"
    assert task.status == "Pending"


def test_complete_marks_task():
    todo = TodoList()
    todo.add("Buy milk")
    todo.complete(1)
    assert [task.status for task in todo] == ["Completed"]


@pytest.mark.parametrize("number", [0, 2, -1])
def test_invalid_numbers_are_rejected(number):
    todo = TodoList()
    todo.add("Buy milk")
    with pytest.raises(IndexError, match="Invalid task number"):
        todo.complete(number)
    with pytest.raises(IndexError, match="Invalid task number"):
        todo.remove(number)
    assert len(todo) == 1


def test_remove_keeps_order_of_others():
    todo = TodoList()
    for description in ("first", "second", "third"):
        todo.add(description)
    removed = todo.remove(2)
    assert removed == Task("second")
    assert [task.description for task in todo] == ["first", "third"]


def test_render_empty_list():
    assert TodoList().render() == "\nNo tasks in the list.\n"


def test_render_numbers_tasks_with_status():
    todo = TodoList()
    todo.add("Buy milk")
    todo.add("Walk dog")
    todo.complete(2)
    rendered = todo.render()
    assert "1. Buy milk [Pending]\n" in rendered
    assert "2. Walk dog [Completed]\n" in rendered
    assert "TASK LIST" in rendered


def test_run_add_and_complete():
    todo, output = run_with("1\nBuy milk\n\n3\n1\n\n0\n")
    assert [(task.description, task.completed) for task in todo] == [("Buy milk", True)]
    assert "Task added successfully!" in output
    assert "Task marked as completed!" in output
    assert output.endswith("\nExiting the To-Do List Manager. Goodbye!\n")


def test_run_remove_and_view():
    todo, output = run_with("1\nBuy milk\n\n4\n1\n\n2\n\n0\n")
    assert len(todo) == 0
    assert "Task removed successfully!" in output
    assert "\nNo tasks in the list.\n" in output


def test_run_invalid_task_number():
    todo, output = run_with("1\nBuy milk\n\n3\n5\n\n0\n")
    assert [task.completed for task in todo] == [False]
    assert "\nInvalid task number.\n" in output


def test_run_empty_list_messages():
    todo, output = run_with("3\n\n4\n\n0\n")
    assert len(todo) == 0
    assert "No tasks to mark as completed." in output
    assert "No tasks to remove." in output


def test_run_invalid_choice():
    _, output = run_with("9\n\nabc\n\n0\n")
    assert output.count("Invalid choice! Please try again.") == 2


def test_run_stops_at_end_of_input():
    todo, output = run_with("1\nBuy milk\n")
    assert [task.description for task in todo] == ["Buy milk"]
    assert "Goodbye" not in output