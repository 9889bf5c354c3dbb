import logging
import re
from typing import Optional

from fastapi import Depends, FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_project.errors import TodoError, ValidationError
from todo_project.settings import Settings
from todo_project.store import Todo, TodoStore

logger = logging.getLogger(__name__)

_ID_PATTERN = re.compile(r"-?[0-9]+")


class TodoCreate(BaseModel):
    title: Optional[str] = None


def get_store(request: Request) -> TodoStore:
    return request.app.state.store


def parse_todo_id(todo_id: str) -> int:
    if not _ID_PATTERN.fullmatch(todo_id):
        raise ValidationError("Invalid todo id")
    try:
        return int(todo_id)
    except ValueError:
        # past the interpreter's int string conversion limit
        raise ValidationError("Invalid todo id")


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(TodoError)
    async def todo_error_handler(request: Request, exc: TodoError):
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning("%s %s has an invalid body: %s", request.method, request.url.path, exc.errors())
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    # Runs inside CORSMiddleware so 500 responses still carry CORS headers.
    @app.middleware("http")
    async def internal_error_middleware(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def create_app(store: Optional[TodoStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(title="TODO API")
    app.state.store = store if store is not None else TodoStore()
    app.state.settings = settings

    register_error_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["Content-Type"],
    )

    @app.get("/health")
    async def health_check():
        """Health check endpoint - just returns OK if server is running"""
        return {"status": "healthy"}

    @app.get("/api/todos", response_model=list[Todo])
    async def list_todos(store: TodoStore = Depends(get_store)):
        return store.list()

    @app.post("/api/todos", response_model=Todo, status_code=status.HTTP_201_CREATED)
    async def create_todo(payload: Optional[TodoCreate] = None, store: TodoStore = Depends(get_store)):
        return store.create(payload.title if payload else None)

    @app.patch("/api/todos/{todo_id}", response_model=Todo)
    async def toggle_todo(todo_id: str, store: TodoStore = Depends(get_store)):
        return store.toggle(parse_todo_id(todo_id))

    @app.delete("/api/todos/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_todo(todo_id: str, store: TodoStore = Depends(get_store)):
        store.remove(parse_todo_id(todo_id))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return app


app = create_app()
