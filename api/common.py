"""
Shared request plumbing for the JSON handlers.

Bodies are parsed by hand so malformed JSON is a 400 with {"error": ...},
matching what the front-end expects, instead of FastAPI's 422 shape.
"""

import json
import logging
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from infra import bootstrap_infrastructure, InfraBootstrap

logger = logging.getLogger(__name__)


class BadRequest(Exception):
    """Client sent an unusable body; rendered as HTTP 400."""
    pass


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def read_json_body(request: Request) -> Dict[str, Any]:
    """
    Parse the request body as a JSON object.

    Raises:
        BadRequest: body is not valid JSON or not an object
    """
    body = await request.body()
    if not body:
        return {}
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise BadRequest("Request body must be valid JSON.")
    if not isinstance(payload, dict):
        raise BadRequest("Request body must be a JSON object.")
    return payload


def require_text(payload: Dict[str, Any], field: str, message: str, max_chars: Optional[int] = None) -> str:
    """Return payload[field] if it is a non-blank string, else raise BadRequest."""
    value = payload.get(field)
    if not isinstance(value, str) or not value.strip():
        raise BadRequest(message)
    if max_chars is not None and len(value) > max_chars:
        raise BadRequest(f"{field} must be at most {max_chars} characters.")
    return value


def get_infrastructure() -> InfraBootstrap:
    """FastAPI dependency returning the process-wide backends."""
    return bootstrap_infrastructure()
