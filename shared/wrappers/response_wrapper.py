import json
import logging
from typing import Any, Callable

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from shared.core.schemas import JsonOutResult

logger = logging.getLogger(__name__)

# Paths whose responses are returned untouched
UNWRAPPED_PATHS = ("/openapi", "/docs", "/redoc", "/api/functions/")

LIST_KEYS = {"items", "recent_orders", "recent_charges", "orders", "inventory_items",
             "customers", "warehouses", "categories"}


def replace_nulls_with_empty(value: Any):
    """
    Recursively replaces None based on expected structure:
    - List fields -> []
    - Primitives -> ""
    """
    if isinstance(value, dict):
        cleaned = {}
        for k, v in value.items():
            if v is None and k.lower() in LIST_KEYS:
                cleaned[k] = []
            else:
                cleaned[k] = replace_nulls_with_empty(v)
        return cleaned

    if isinstance(value, list):
        return [replace_nulls_with_empty(v) for v in value]

    if value is None:
        return ""

    return value


def _passthrough_headers(response) -> dict:
    return {k: v for k, v in response.headers.items() if k.lower() != "content-length"}


class JsonResponseMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable):
        if request.url.path.startswith(UNWRAPPED_PATHS):
            return await call_next(request)

        response = await call_next(request)

        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type:
            return response

        body_bytes = b""
        async for chunk in response.body_iterator:
            body_bytes += chunk

        try:
            data = json.loads(body_bytes.decode("utf-8")) if body_bytes else None
        except ValueError:
            logger.warning("Could not decode JSON body for %s", request.url.path)
            data = None

        # Already wrapped (exception handlers or success_response)
        if isinstance(data, dict) and {"status", "status_code", "message"}.issubset(data.keys()):
            return JSONResponse(
                content=replace_nulls_with_empty(data),
                status_code=response.status_code,
                headers=_passthrough_headers(response),
            )

        if not (200 <= response.status_code < 400):
            message = ""
            if isinstance(data, dict):
                message = str(data.get("detail") or data.get("message") or "")
            elif isinstance(data, str):
                message = data

            wrapped_error = JsonOutResult(
                data=None,
                status="Failure",
                status_code=str(response.status_code),
                message=message or "An unexpected error occurred",
            ).model_dump()
            return JSONResponse(
                content=replace_nulls_with_empty(wrapped_error),
                status_code=response.status_code,
                headers=_passthrough_headers(response),
            )

        wrapped = JsonOutResult(
            data=data if data not in [None, {}] else None,
            status="Success",
            status_code=str(response.status_code),
            message="Data retrieved successfully"
        ).model_dump()

        return JSONResponse(
            content=replace_nulls_with_empty(wrapped),
            status_code=response.status_code,
            headers=_passthrough_headers(response),
        )
