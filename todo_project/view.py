"""View state for the todo page.

``TodoListQuery`` keeps the last fetched collection. Every mutation goes
through ``TodoListQuery.mutate``: the request runs and the cached collection is
invalidated, so the next render fetches the list again. ``build_view`` turns the query
into exactly one of the loading, error, empty or populated states.
"""

import enum
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Optional

from todo_project.client import TodoClient, TodoClientError
from todo_project.store import Todo

logger = logging.getLogger(__name__)


class ViewState(str, enum.Enum):
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    POPULATED = "populated"


@dataclass(frozen=True)
class TodoStats:
    active: int
    completed: int

    @property
    def items_left_label(self) -> str:
        return f"{self.active} items left"

    @property
    def completed_label(self) -> str:
        return f"{self.completed} completed"


@dataclass(frozen=True)
class TodoView:
    state: ViewState
    todos: list[Todo] = field(default_factory=list)
    stats: TodoStats = TodoStats(active=0, completed=0)
    error: Optional[str] = None


def compute_stats(todos: list[Todo]) -> TodoStats:
    completed = sum(1 for todo in todos if todo.completed)
    return TodoStats(active=len(todos) - completed, completed=completed)


class TodoListQuery:
    def __init__(self, client: TodoClient):
        self.client = client
        self.data: Optional[list[Todo]] = None
        self.error: Optional[str] = None

    @property
    def is_loading(self) -> bool:
        return self.data is None and self.error is None

    def invalidate(self) -> None:
        self.data = None
        self.error = None

    async def fetch(self) -> None:
        try:
            todos = await self.client.list_todos()
        except TodoClientError as e:
            logger.warning("Loading todos failed: %s", e)
            self.data, self.error = None, str(e)
            return
        self.data, self.error = todos, None

    async def mutate(self, action: Callable[[], Awaitable[object]]) -> bool:
        """Run a mutation and invalidate the cached collection.

        Returns False, with the error recorded, when the request failed. On
        success the collection must be fetched again before it is rendered.
        """
        try:
            await action()
        except TodoClientError as e:
            logger.warning("Todo request failed: %s", e)
            self.data, self.error = None, str(e)
            return False
        self.invalidate()
        return True

    async def add(self, title: str) -> bool:
        return await self.mutate(lambda: self.client.create_todo(title))

    async def toggle(self, todo_id) -> bool:
        return await self.mutate(lambda: self.client.toggle_todo(todo_id))

    async def delete(self, todo_id) -> bool:
        return await self.mutate(lambda: self.client.delete_todo(todo_id))


def build_view(query: TodoListQuery) -> TodoView:
    if query.is_loading:
        return TodoView(state=ViewState.LOADING)
    if query.error is not None:
        return TodoView(state=ViewState.ERROR, error=query.error)
    todos = query.data or []
    if not todos:
        return TodoView(state=ViewState.EMPTY)
    return TodoView(state=ViewState.POPULATED, todos=todos, stats=compute_stats(todos))
