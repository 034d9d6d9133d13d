"""n8n onboarding relay endpoint."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from nutrition_dashboard.api.cors import CorsPolicy
from nutrition_dashboard.errors import (
    ConfigurationError,
    MethodNotAllowed,
    RelayError,
    UpstreamError,
    ValidationError,
)

if TYPE_CHECKING:
    from nutrition_dashboard.containers import AppContainer

ONBOARDING_PATH = "/api/n8n/onboarding"

router = APIRouter(prefix="/api/n8n", tags=["webhooks"])

_logger = logging.getLogger(__name__)

_ACCEPTED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/onboarding", methods=_ACCEPTED_METHODS)
async def onboarding_webhook(request: Request) -> Response:
    """Relay an onboarding event to the configured n8n webhook."""
    container: AppContainer = request.app.state.container
    cors = CorsPolicy.from_settings(container.settings)

    if request.method == "OPTIONS":
        return Response(
            status_code=status.HTTP_200_OK, headers=cors.preflight_headers()
        )

    try:
        if request.method != "POST":
            raise MethodNotAllowed(request.method)
        payload = await _read_json_body(request)
        data = await container.webhook_relay.forward(payload)
    except RelayError as exc:
        _log_relay_error(exc)
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_body(),
            headers=cors.response_headers(),
        )
    except Exception as exc:
        _logger.exception("Error in onboarding relay")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "details": str(exc)},
            headers=cors.response_headers(),
        )

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=data,
        headers=cors.response_headers(),
    )


async def _read_json_body(request: Request) -> dict[str, object]:
    """Return the request body as a JSON object; empty bodies become {}."""
    raw = await request.body()
    if not raw.strip():
        return {}
    payload = json.loads(raw)
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def _log_relay_error(exc: RelayError) -> None:
    if isinstance(exc, ConfigurationError):
        _logger.error("Relay misconfigured: %s", exc.message)
    elif isinstance(exc, UpstreamError):
        _logger.error(
            "Error from n8n onboarding webhook (status=%s): %s",
            exc.upstream_status,
            exc.body,
        )
    elif isinstance(exc, MethodNotAllowed):
        _logger.warning("Relay rejected method: %s", exc.method)
    else:
        _logger.warning("Relay rejected request: %s", exc.message)


async def relay_http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """Answer unrouted methods on the relay path with the relay's 405 body."""
    if exc.status_code != status.HTTP_405_METHOD_NOT_ALLOWED or (
        request.url.path != ONBOARDING_PATH
    ):
        return await http_exception_handler(request, exc)
    container: AppContainer = request.app.state.container
    cors = CorsPolicy.from_settings(container.settings)
    error = MethodNotAllowed(request.method)
    _log_relay_error(error)
    return JSONResponse(
        status_code=error.status_code,
        content=error.to_body(),
        headers=cors.response_headers(),
    )
