import pytest

from console import render, run_command
from fakes import FakeApi
from fsm import TASKS_TAB
from frontend import MindAIApp


@pytest.fixture
def ui():
    return MindAIApp(FakeApi())


def answers(*values):
    queue = list(values)
    return lambda prompt, **kwargs: queue.pop(0)


def test_logged_out_screen(ui):
    screen = render(ui)
    assert "== Sign In ==" in screen
    run_command(ui, "switch")
    assert "== Sign Up ==" in render(ui)


def test_sign_up_through_form(ui):
    run_command(ui, "switch")
    assert run_command(ui, "go", ask=answers("A", "a@b.com", "x"))
    assert ui.machine.logged_in
    screen = render(ui)
    assert "Welcome, A!" in screen
    assert "[💬 Chat]" in screen
    assert "Start a conversation with MindAI!" in screen


def test_failed_login_shows_banner(ui):
    run_command(ui, "go", ask=answers("a@b.com", "x"))
    assert "! Invalid email or password" in render(ui)


def test_chat_and_tasks(ui):
    run_command(ui, "switch")
    run_command(ui, "go", ask=answers("A", "a@b.com", "x"))
    run_command(ui, "hello there")
    assert "mindai> echo: hello there" in render(ui)

    run_command(ui, ":tasks")
    assert ui.machine.active_tab == TASKS_TAB
    assert "No tasks yet" in render(ui)

    run_command(ui, "add buy milk")
    task_id = ui.tasks[0]["id"]
    assert f"[ ] #{task_id} buy milk (medium)" in render(ui)

    run_command(ui, f"done {task_id}")
    assert f"[x] #{task_id} buy milk" in render(ui)

    run_command(ui, f"rm {task_id}")
    assert ui.tasks == []

    run_command(ui, "rm nope")
    assert "! Not a task id: 'nope'" in render(ui)


def test_logout_and_quit(ui):
    run_command(ui, "go", ask=answers("a@b.com", "x"))
    run_command(ui, "switch")
    run_command(ui, "go", ask=answers("A", "a@b.com", "x"))
    run_command(ui, ":logout")
    assert not ui.machine.logged_in
    assert run_command(ui, ":quit") is False
