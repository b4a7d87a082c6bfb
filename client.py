"""Async HTTP client for the MindAI backend."""
import asyncio
import json
import logging
from typing import Any, Dict, Optional

import aiohttp

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A failed API call.

    ``detail`` is the server's error text, or None when the server sent
    none; ``status`` is None for network-layer failures.
    """

    def __init__(self, detail: Optional[str], status: Optional[int] = None):
        super().__init__(detail or f"HTTP {status}")
        self.detail = detail
        self.status = status


class MindAIClient:
    def __init__(self, base_url: str, token: Optional[str] = None):
        self.base_url = base_url.rstrip("/")
        self.token = token

    async def _request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        url = f"{self.base_url}{path}"
        try:
            async with aiohttp.ClientSession() as session:
                async with session.request(method, url, json=payload, headers=headers) as response:
                    status = response.status
                    text = await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise ApiError(f"Connection error: {e}") from e

        try:
            data = json.loads(text) if text else None
        except ValueError:
            data = None

        if status >= 400:
            detail = data.get("error") if isinstance(data, dict) else None
            raise ApiError(detail, status=status)
        if not isinstance(data, dict):
            logger.warning("%s %s returned a non-JSON body: %.200s", method, url, text)
            raise ApiError("Connection error: invalid response", status=status)
        return data

    async def signup(self, email: str, password: str, name: str = "") -> Dict[str, Any]:
        return await self._request("POST", "/api/auth/signup", {"email": email, "password": password, "name": name})

    async def login(self, email: str, password: str) -> Dict[str, Any]:
        return await self._request("POST", "/api/auth/login", {"email": email, "password": password})

    async def chat(self, message: str) -> Dict[str, Any]:
        return await self._request("POST", "/api/chat", {"message": message})

    async def create_task(self, title: str, priority: str = "medium", due_date: Optional[str] = None) -> Dict[str, Any]:
        payload = {"title": title, "priority": priority}
        if due_date:
            payload["dueDate"] = due_date
        return await self._request("POST", "/api/tasks", payload)

    async def list_tasks(self) -> Dict[str, Any]:
        return await self._request("GET", "/api/tasks")

    async def update_task(self, task_id: int, **fields) -> Dict[str, Any]:
        return await self._request("PUT", f"/api/tasks/{task_id}", fields)

    async def delete_task(self, task_id: int) -> Dict[str, Any]:
        return await self._request("DELETE", f"/api/tasks/{task_id}")

    async def health(self) -> Dict[str, Any]:
        return await self._request("GET", "/health")
