"""Pytest fixtures for the TODO app tests."""

import httpx
import pytest
from fastapi.testclient import TestClient

from todo_project.app import create_app as create_frontend_app
from todo_project.app_backend import create_app as create_backend_app
from todo_project.client import TodoClient
from todo_project.settings import Settings
from todo_project.store import TodoStore


@pytest.fixture
def settings() -> Settings:
    return Settings(backend_url="http://backend", cors_origins="http://localhost:3000")


@pytest.fixture
def store() -> TodoStore:
    return TodoStore()


@pytest.fixture
def backend_app(store: TodoStore, settings: Settings):
    return create_backend_app(store=store, settings=settings)


@pytest.fixture
def api(backend_app) -> TestClient:
    """Test client for the JSON API. Server errors come back as responses."""
    return TestClient(backend_app, raise_server_exceptions=False)


@pytest.fixture
def todo_client(backend_app, settings: Settings) -> TodoClient:
    """Backend client wired to the in-process API."""
    return TodoClient(settings.backend_url, transport=httpx.ASGITransport(app=backend_app))


@pytest.fixture
def frontend(todo_client: TodoClient, settings: Settings) -> TestClient:
    return TestClient(create_frontend_app(client=todo_client, settings=settings))


def todo_payload(todo_id: int, title: str, completed: bool = False) -> dict:
    return {
        "id": todo_id,
        "title": title,
        "completed": completed,
        "createdAt": "2026-10-18T09:00:00.000Z",
    }
