"""Async HTTP client for the TODO API, used by the frontend."""

import logging
from typing import Optional, Union
from urllib.parse import quote

import httpx

from todo_project.store import Todo

logger = logging.getLogger(__name__)


class TodoClientError(Exception):
    """A request to the TODO API failed, either on the network or with a non-success status."""


class TodoClient:
    def __init__(self, base_url: str, timeout: float = 5.0,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        url = f"{self.base_url}{path}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise TodoClientError(f"Could not reach the server: {e}") from e

        logger.debug("%s %s -> %d", method, url, response.status_code)
        if response.is_error:
            raise TodoClientError(self._error_message(response))
        return response

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict) and data.get("error"):
            return str(data["error"])
        return f"HTTP error {response.status_code}"

    @staticmethod
    def _parse(response: httpx.Response, many: bool = False):
        try:
            data = response.json()
            if many:
                return [Todo.model_validate(item) for item in data]
            return Todo.model_validate(data)
        except (TypeError, ValueError) as e:
            raise TodoClientError(f"Unexpected response from the server: {e}") from e

    async def list_todos(self) -> list[Todo]:
        response = await self._request("GET", "/api/todos")
        return self._parse(response, many=True)

    async def create_todo(self, title: str) -> Todo:
        response = await self._request("POST", "/api/todos", json={"title": title})
        return self._parse(response)

    async def toggle_todo(self, todo_id: Union[int, str]) -> Todo:
        response = await self._request("PATCH", f"/api/todos/{quote(str(todo_id), safe='')}")
        return self._parse(response)

    async def delete_todo(self, todo_id: Union[int, str]) -> None:
        await self._request("DELETE", f"/api/todos/{quote(str(todo_id), safe='')}")
