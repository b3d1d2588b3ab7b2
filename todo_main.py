"""Main FastAPI application for the todo API."""

from __future__ import annotations

import logging
import sys
import uuid
from typing import Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes import router as todo_router
from api.users import router as users_router
from core.errors import ServiceError
from core.logging_utils import configure_logging, reset_request_id, set_request_id
from core.settings import Settings, get_settings
from core.state import AppState

logger = logging.getLogger(__name__)

API_GUIDE = """\
This is a restful API representing a todolist and users.

Make an account by POSTing /users with a json containing username and password.
Log into (get a new idtoken for) an existing account by POSTing /users/:username
with a json containing password. Both respond with the idtoken used to authenticate.

There is a default account with username "admin" and idtoken "faketoken".

GET /todo returns the URIs of all todos, no matter what user.
GET /todo?field=:field&search=:search, with field in [owner, title, content],
returns the todos whose field contains the search string.

POST /todo adds a new todo: title, content, owner and idtoken are required.
GET, PUT and DELETE /todo/:id read, modify (same arguments as POST) and delete
a todo. DELETE only needs owner and idtoken.

All other endpoints return a 404."""


def create_app(settings: Optional[Settings] = None, state: Optional[AppState] = None) -> FastAPI:
    """Build an app with its own stores."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Todo API",
        description="A todo list with token-authenticated owners",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.store = state or AppState.create(seed_admin=settings.seed_admin)

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError) -> Response:
        logger.debug("%s %s -> %s (%s)", request.method, request.url.path, exc.status_code, exc.message)
        return Response(status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
        # Unknown method on a known path is reported like an unknown path.
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            return Response(status_code=status.HTTP_404_NOT_FOUND)
        return Response(status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> Response:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request_token = set_request_id(request_id)
        try:
            response = await call_next(request)
        finally:
            reset_request_id(request_token)
        response.headers["X-Request-ID"] = request_id
        # CORSMiddleware only answers requests carrying an Origin header.
        response.headers.setdefault("Access-Control-Allow-Origin", "*")
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location", "X-Request-ID"],
    )

    app.include_router(todo_router)
    app.include_router(users_router)
    return app


app = create_app()


def main() -> None:
    import uvicorn

    settings = get_settings()
    logger.info("Server starting at %s/", settings.public_url)
    logger.info("Basic documentation:\n%s", API_GUIDE)
    try:
        uvicorn.run(
            app,
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
        )
    except KeyboardInterrupt:
        logger.info("Shutdown requested...")
        sys.exit(0)


if __name__ == "__main__":
    main()
