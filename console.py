"""Terminal front end for MindAI.

    mindai --api-url http://localhost:3001
"""
import asyncio
import logging

import click

from client import ApiError, MindAIClient
from config import ClientConfig
from fsm import CHAT_TAB, TASKS_TAB
from frontend import MindAIApp, SessionFile

AUTH_HELP = "Commands: go (fill in the form), switch (sign in / sign up), quit"
CHAT_HELP = "Type a message to send it. :tasks  :logout  :quit"
TASKS_HELP = "add <title>  done <id>  rm <id>  refresh  :chat  :logout  :quit"


def render(app):
    """Text for the current screen."""
    lines = ["🧠 MindAI"]
    machine = app.machine

    if not machine.logged_in:
        lines.append("Your Intelligent AI Assistant")
        lines.append("== Sign Up ==" if machine.showing_sign_up else "== Sign In ==")
        if app.error:
            lines.append(f"! {app.error}")
        lines.append(AUTH_HELP)
        return "\n".join(lines)

    user = app.user or {}
    lines.append(f"Welcome, {user.get('name') or user.get('email')}!")
    tabs = [f"[{label}]" if machine.active_tab == tab else f" {label} "
            for tab, label in ((CHAT_TAB, "💬 Chat"), (TASKS_TAB, "✓ Tasks"))]
    lines.append(" ".join(tabs))

    if machine.active_tab == CHAT_TAB:
        if not app.chat_history:
            lines.append("Start a conversation with MindAI!")
        for msg in app.chat_history:
            who = "you" if msg["role"] == "user" else "mindai"
            lines.append(f"{who}> {msg['content']}")
        help_text = CHAT_HELP
    else:
        if not app.tasks:
            lines.append("No tasks yet. Add one to get started!")
        for task in app.tasks:
            mark = "x" if task.get("completed") else " "
            lines.append(f"[{mark}] #{task['id']} {task['title']} ({task['priority']})")
        help_text = TASKS_HELP

    if app.loading:
        lines.append("Loading...")
    if app.error:
        lines.append(f"! {app.error}")
    lines.append(help_text)
    return "\n".join(lines)


def _task_id(arg):
    try:
        return int(arg)
    except ValueError:
        return None


def run_command(app, line, ask=click.prompt):
    """Apply one typed command to ``app``. Returns False once the user quits."""
    line = line.strip()
    if line in (":quit", "quit"):
        return False

    machine = app.machine
    if not machine.logged_in:
        if line == "switch":
            app.toggle_sign_up()
        elif line == "go":
            name = ask("Full Name") if machine.showing_sign_up else ""
            email = ask("Email")
            password = ask("Password", hide_input=True)
            if machine.showing_sign_up:
                asyncio.run(app.sign_up(email, password, name))
            else:
                asyncio.run(app.login(email, password))
        return True

    if line == ":logout":
        app.logout()
    elif line == ":chat":
        app.switch_tab(CHAT_TAB)
    elif line == ":tasks":
        app.switch_tab(TASKS_TAB)
        if not app.tasks:
            asyncio.run(app.refresh_tasks())
    elif machine.active_tab == CHAT_TAB:
        asyncio.run(app.send_message(line))
    else:
        command, _, arg = line.partition(" ")
        if command == "add":
            asyncio.run(app.add_task(arg))
        elif command == "refresh":
            asyncio.run(app.refresh_tasks())
        elif command in ("done", "rm"):
            task_id = _task_id(arg)
            if task_id is None:
                app.error = f"Not a task id: {arg!r}"
            elif command == "done":
                asyncio.run(app.toggle_task(task_id))
            else:
                asyncio.run(app.delete_task(task_id))
        elif line:
            app.error = f"Unknown command: {command}"
    return True


@click.command()
@click.option("--api-url", default=ClientConfig.API_URL, show_default=True, help="Backend base URL.")
@click.option("--session-file", default=str(ClientConfig.SESSION_FILE), show_default=True,
              type=click.Path(dir_okay=False), help="Where the signed-in session is kept.")
@click.option("--verbose", is_flag=True, help="Log client activity.")
def main(api_url, session_file, verbose):
    """Chat with MindAI and manage your tasks from the terminal."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    app = MindAIApp(MindAIClient(api_url), SessionFile(session_file))
    try:
        asyncio.run(app.api.health())
    except ApiError as e:
        click.secho(f"Backend not reachable at {api_url}: {e}", fg="yellow")
    app.restore()

    while True:
        click.echo()
        click.echo(render(app))
        line = click.prompt(">", default="", show_default=False)
        if not run_command(app, line):
            break


if __name__ == "__main__":
    main()
