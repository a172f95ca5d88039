"""
AWS Lambda Entry Point

Serves the same FastAPI application behind API Gateway through Mangum.
The DynamoDB handle is built once per cold start, not per invocation.
"""

from typing import Any

from mangum import Mangum

from todo_service.db.dynamodb import setup_dynamodb
from todo_service.main import app

setup_dynamodb()

# Lifespan is off: setup_dynamodb() above already ran for this container
_asgi_handler = Mangum(app, lifespan="off")


def strip_stage_prefix(event: dict[str, Any]) -> dict[str, Any]:
    """
    Remove the `/{stage}` prefix from the request path

    Handles REST API (`path`) and HTTP API (`rawPath` and
    `requestContext.http.path`, which Mangum routes on) events. The
    `$default` stage has no prefix and is left untouched.

    Args:
        event: API Gateway proxy event

    Returns:
        dict: Event with the prefix removed (a copy; the input is not mutated)
    """
    request_context = event.get("requestContext") or {}
    stage = request_context.get("stage")
    if not stage or stage == "$default":
        return event

    prefix = f"/{stage}"

    def _strip(path):
        if isinstance(path, str) and (path == prefix or path.startswith(prefix + "/")):
            return path[len(prefix):] or "/"
        return path

    stripped = dict(event)
    for field in ("path", "rawPath"):
        if field in event:
            stripped[field] = _strip(event[field])

    http = request_context.get("http")
    if isinstance(http, dict) and "path" in http:
        stripped["requestContext"] = {
            **request_context,
            "http": {**http, "path": _strip(http["path"])},
        }
    return stripped


def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Lambda handler"""
    return _asgi_handler(strip_stage_prefix(event), context)
