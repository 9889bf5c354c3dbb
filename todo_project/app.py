import logging
from pathlib import Path
from typing import Optional

from fastapi import Depends, FastAPI, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from todo_project.client import TodoClient
from todo_project.settings import Settings
from todo_project.view import TodoListQuery, ViewState, build_view

logger = logging.getLogger(__name__)

# Set up templates
templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


def get_query(request: Request) -> TodoListQuery:
    return TodoListQuery(request.app.state.client)


def render(request: Request, query: TodoListQuery) -> HTMLResponse:
    view = build_view(query)
    return templates.TemplateResponse(
        request,
        "index.html",
        {"view": view, "states": ViewState},
    )


def after_mutation(request: Request, query: TodoListQuery, succeeded: bool):
    # Redirect so a browser reload repeats the GET, not the form post.
    if succeeded:
        return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
    return render(request, query)


def create_app(client: Optional[TodoClient] = None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(title="TODO App")
    app.state.client = client or TodoClient(settings.backend_url, timeout=settings.request_timeout)

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    @app.get("/", response_class=HTMLResponse)
    async def root(request: Request, query: TodoListQuery = Depends(get_query)):
        await query.fetch()
        return render(request, query)

    @app.post("/todos", response_class=HTMLResponse)
    async def add_todo(request: Request, title: str = Form(""), query: TodoListQuery = Depends(get_query)):
        return after_mutation(request, query, await query.add(title))

    # ids stay strings so a malformed one reaches the API and comes back as the error page
    @app.post("/todos/{todo_id}/toggle", response_class=HTMLResponse)
    async def toggle_todo(request: Request, todo_id: str, query: TodoListQuery = Depends(get_query)):
        return after_mutation(request, query, await query.toggle(todo_id))

    @app.post("/todos/{todo_id}/delete", response_class=HTMLResponse)
    async def delete_todo(request: Request, todo_id: str, query: TodoListQuery = Depends(get_query)):
        return after_mutation(request, query, await query.delete(todo_id))

    return app


app = create_app()
