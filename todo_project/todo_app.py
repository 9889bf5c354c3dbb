"""Start the TODO backend API or the frontend page under uvicorn.

    todo-app backend       # JSON API on $HOST:$PORT
    todo-app frontend      # HTML page on $HOST:$FRONTEND_PORT, talking to $BACKEND_URL
"""

import argparse
import logging

import uvicorn

from todo_project import app as frontend
from todo_project import app_backend as backend
from todo_project.logging_setup import setup_logging
from todo_project.settings import Settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="todo-app", description="Run the TODO app services.")
    parser.add_argument("service", choices=["backend", "frontend"])
    parser.add_argument("--host", help="bind address (default: $HOST)")
    parser.add_argument("--port", type=int, help="listen port (default: $PORT or $FRONTEND_PORT)")
    return parser


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)
    settings = Settings()
    setup_logging(settings)

    host = args.host or settings.host
    if args.service == "backend":
        application = backend.create_app(settings=settings)
        port = args.port or settings.port
    else:
        application = frontend.create_app(settings=settings)
        port = args.port or settings.frontend_port

    logger.info("Server %s started in port %d", args.service, port)
    uvicorn.run(application, host=host, port=port, log_config=None)


if __name__ == "__main__":
    main()
