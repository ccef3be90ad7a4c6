"""Main FastAPI application for the user/todo API."""

import logging
import uuid

from fastapi import FastAPI, Request

from todo_contracts.api.routes import router as api_router
from todo_contracts.logging_utils import configure_logging, reset_request_id, set_request_id
from todo_contracts.settings import get_settings

configure_logging(get_settings().log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Todo Contracts API",
    description="Users and todos served through unified or segmented store contracts",
    version="1.0.0",
)


@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request_token = set_request_id(request_id)
    try:
        response = await call_next(request)
    finally:
        reset_request_id(request_token)
    response.headers["X-Request-ID"] = request_id
    return response


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with basic API info."""
    return {
        "message": "Todo Contracts API",
        "contract_style": get_settings().contract_style,
        "endpoints": "/api/users, /api/todos",
    }


@app.get("/health")
def read_health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(api_router, prefix="/api")
