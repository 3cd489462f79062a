"""User Service — FastAPI application for managing users."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Optional

from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import TypeAdapter, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from common.models import ErrorResponse, User, UserCandidate
from user_service.store import UserStore
from user_service.validation import validate_user

logger = logging.getLogger(__name__)

_candidate_adapter = TypeAdapter(Optional[UserCandidate])


class ApiError(Exception):
    """A failure that maps directly onto an error response."""

    def __init__(self, status_code: int, message: str, details: str):
        super().__init__(details)
        self.status_code = status_code
        self.message = message
        self.details = details


def _user_not_found(user_id: str) -> ApiError:
    return ApiError(404, "User not found", f"No user with id: {user_id}")


def get_store(request: Request) -> UserStore:
    return request.app.state.store


async def read_candidate(request: Request) -> Optional[UserCandidate]:
    """Decode the request body; an empty body or ``null`` means no payload."""
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return _candidate_adapter.validate_json(raw)
    except ValidationError:
        raise ApiError(400, "Invalid JSON", "Request body must be valid JSON.") from None


def _validated(candidate: Optional[UserCandidate]) -> UserCandidate:
    error = validate_user(candidate)
    if error is not None:
        raise ApiError(400, "Validation error", error)
    return candidate


def create_app(store: Optional[UserStore] = None) -> FastAPI:
    app = FastAPI(title="User Service", version="0.1.0")
    app.state.store = store if store is not None else UserStore()

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        body = ErrorResponse(message=exc.message, details=exc.details)
        return JSONResponse(status_code=exc.status_code, content=body.model_dump())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        try:
            message = HTTPStatus(exc.status_code).phrase
        except ValueError:
            message = "HTTP error"
        body = ErrorResponse(message=message, details=str(exc.detail))
        return JSONResponse(status_code=exc.status_code, content=body.model_dump(), headers=exc.headers)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        body = ErrorResponse(message="Internal server error", details="An unexpected error occurred.")
        return JSONResponse(status_code=500, content=body.model_dump())

    @app.get("/hello", response_class=PlainTextResponse)
    def hello():
        return "Hello from FastAPI"

    @app.get("/health", response_class=PlainTextResponse)
    def health():
        return "OK"

    @app.get("/echo/{msg}", response_class=PlainTextResponse)
    def echo(msg: str):
        return f"echo: {msg}"

    @app.get("/users", response_model=list[User])
    def list_users(
        name: Optional[str] = None,
        email: Optional[str] = None,
        store: UserStore = Depends(get_store),
    ):
        if (name is None or not name.strip()) and (email is None or not email.strip()):
            return store.get_all()
        return store.find_users(name, email)

    @app.get("/users/{user_id}", response_model=User)
    def get_user(user_id: str, store: UserStore = Depends(get_store)):
        user = store.get_by_id(user_id)
        if user is None:
            raise _user_not_found(user_id)
        return user

    @app.post("/users", response_model=User, status_code=201)
    def create_user(
        candidate: Optional[UserCandidate] = Depends(read_candidate),
        store: UserStore = Depends(get_store),
    ):
        return store.create(_validated(candidate))

    @app.put("/users/{user_id}", response_model=User)
    def update_user(
        user_id: str,
        candidate: Optional[UserCandidate] = Depends(read_candidate),
        store: UserStore = Depends(get_store),
    ):
        user = store.update(user_id, _validated(candidate))
        if user is None:
            raise _user_not_found(user_id)
        return user

    @app.delete("/users/{user_id}", status_code=204)
    def delete_user(user_id: str, store: UserStore = Depends(get_store)):
        if not store.delete(user_id):
            raise _user_not_found(user_id)
        return Response(status_code=204)

    return app


app = create_app()
