import logging
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from todo_project.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.strftime('%Y-%m-%dT%H:%M:%S.') + f"{now.microsecond // 1000:03d}Z"


class Todo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    completed: bool = False
    created_at: str = Field(alias="createdAt")


class TodoStore:
    """Ordered in-memory todos plus the next-id counter.

    Ids come from a counter that only moves forward, so an id is never handed
    out twice, even after the todo holding it is removed.
    """

    def __init__(self):
        self._todos: list[Todo] = []
        self._next_id = 1

    def __len__(self):
        return len(self._todos)

    def list(self) -> list[Todo]:
        return list(self._todos)

    def get(self, todo_id: int) -> Todo:
        for todo in self._todos:
            if todo.id == todo_id:
                return todo
        raise NotFoundError("Todo not found")

    def create(self, title: Optional[str]) -> Todo:
        title = (title or "").strip()
        if not title:
            raise ValidationError("Title is required")
        todo = Todo(id=self._next_id, title=title, created_at=utc_timestamp())
        self._next_id += 1
        self._todos.append(todo)
        logger.info("Created todo %d", todo.id)
        return todo

    def toggle(self, todo_id: int) -> Todo:
        todo = self.get(todo_id)
        todo.completed = not todo.completed
        logger.info("Toggled todo %d to completed=%s", todo.id, todo.completed)
        return todo

    def remove(self, todo_id: int) -> None:
        todo = self.get(todo_id)
        self._todos.remove(todo)
        logger.info("Removed todo %d", todo_id)
