"""Client-side view state for the MindAI screens.

``MindAIApp`` owns everything the screens render: the signed-in user, chat
history, task list, the loading flag and the error banner. Every network
action goes through ``_call`` so it sets ``loading`` while the request is in
flight and leaves either fresh data or an error message behind.
"""
import json
import logging
import time
from pathlib import Path

from client import ApiError
from fsm import UIStateMachine

logger = logging.getLogger(__name__)


class SessionFile:
    """``{user, token}`` persisted between runs."""

    def __init__(self, path):
        self.path = Path(path)

    def load(self):
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return None
        if not isinstance(data, dict) or not data.get("user"):
            return None
        return data

    def save(self, user, token):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({"user": user, "token": token}), encoding="utf-8")

    def clear(self):
        self.path.unlink(missing_ok=True)


class MindAIApp:
    def __init__(self, api, session_file=None):
        self.api = api
        self.session_file = session_file
        self.machine = UIStateMachine()
        self._clear()

    def _clear(self):
        self.user = None
        self.chat_history = []
        self.tasks = []
        self.loading = False
        self.error = ""

    async def _call(self, fallback, request):
        self.loading = True
        self.error = ""
        try:
            return await request
        except ApiError as e:
            self.error = e.detail or fallback
            return None
        finally:
            self.loading = False

    def _signed_in(self, user, token):
        self.user = user
        self.api.token = token
        if self.session_file is not None:
            self.session_file.save(user, token)
        self.machine.transition("authenticate")
        logger.info("Signed in as %s", user.get("email"))

    # Auth

    def restore(self):
        """Pick up a saved session without asking the server."""
        if self.session_file is None:
            return False
        saved = self.session_file.load()
        if saved is None:
            return False
        self.user = saved["user"]
        self.api.token = saved.get("token")
        self.machine.transition("authenticate")
        return True

    async def sign_up(self, email, password, name=""):
        data = await self._call("Sign up failed", self.api.signup(email, password, name))
        if data is not None:
            self._signed_in(data["user"], data.get("token"))
        return data is not None

    async def login(self, email, password):
        data = await self._call("Login failed", self.api.login(email, password))
        if data is not None:
            self._signed_in(data["user"], data.get("token"))
        return data is not None

    def logout(self):
        self._clear()
        self.api.token = None
        if self.session_file is not None:
            self.session_file.clear()
        self.machine.transition("logout")

    def toggle_sign_up(self):
        self.error = ""
        return self.machine.transition("toggle_sign_up")

    def switch_tab(self, tab):
        return self.machine.transition("switch_tab", tab=tab)

    # Chat

    async def send_message(self, text):
        if not text.strip():
            return False
        self.chat_history.append({"role": "user", "content": text, "id": time.time_ns()})
        data = await self._call("Failed to send message", self.api.chat(text))
        if data is None:
            return False
        self.chat_history.append({"role": "assistant", "content": data["message"], "id": time.time_ns()})
        return True

    # Tasks

    async def refresh_tasks(self):
        data = await self._call("Failed to load tasks", self.api.list_tasks())
        if data is not None:
            self.tasks = list(data["tasks"])
        return data is not None

    async def add_task(self, title, priority="medium", due_date=None):
        if not title.strip():
            return False
        data = await self._call("Failed to add task", self.api.create_task(title, priority, due_date))
        if data is not None:
            self.tasks.append(data["task"])
        return data is not None

    async def toggle_task(self, task_id):
        task = self._task(task_id)
        if task is None:
            self.error = "Task not found"
            return False
        data = await self._call(
            "Failed to update task", self.api.update_task(task_id, completed=not task["completed"])
        )
        if data is not None:
            self.tasks = [data["task"] if t["id"] == task_id else t for t in self.tasks]
        return data is not None

    async def delete_task(self, task_id):
        data = await self._call("Failed to delete task", self.api.delete_task(task_id))
        if data is not None:
            self.tasks = [t for t in self.tasks if t["id"] != task_id]
        return data is not None

    def _task(self, task_id):
        return next((t for t in self.tasks if t["id"] == task_id), None)
