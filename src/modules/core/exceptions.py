"""API error translation.

``api_exception_handler`` is installed as DRF's ``EXCEPTION_HANDLER`` and
is the single place where failures raised by views and services become
HTTP responses.  Every failure is rendered as ``ErrorResponseDTO``:

    {"timestamp", "status", "error", "message", "path"}

Domain exceptions map to 400/404, DRF ``APIException`` subclasses keep
their own status code, and anything else becomes a 500 whose message is
the exception text (the traceback is only logged).
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Dict, List, Optional

import structlog
from django.http import Http404
from django.utils import timezone
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response

from modules.core.dtos import ErrorResponseDTO
from modules.orders.exceptions import OrderNotFound, OrderValidationError

logger = structlog.get_logger(__name__)

_DOMAIN_STATUS: Dict[type, int] = {
    OrderValidationError: status.HTTP_400_BAD_REQUEST,
    OrderNotFound: status.HTTP_404_NOT_FOUND,
}

def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    request = context.get("request")
    path = request.path if request is not None else ""
    headers: Dict[str, str] = {}

    domain_status = _domain_status(exc)
    if domain_status is not None:
        status_code = domain_status
        message = str(exc)
        logger.info(
            "api.domain_error",
            error_type=type(exc).__name__,
            status_code=status_code,
            path=path,
        )
    elif isinstance(exc, Http404):
        status_code = status.HTTP_404_NOT_FOUND
        message = str(exc) or "Not found."
    elif isinstance(exc, APIException):
        status_code = exc.status_code
        message = ", ".join(flatten_error_detail(exc.detail))
        headers = _response_headers(exc)
        logger.info("api.request_rejected", status_code=status_code, path=path)
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        message = str(exc) or type(exc).__name__
        logger.exception("api.unhandled_error", path=path)

    body = ErrorResponseDTO(
        timestamp=timezone.now(),
        status=status_code,
        error=HTTPStatus(status_code).phrase,
        message=message,
        path=path,
    )
    return Response(body.model_dump(mode="json"), status=status_code, headers=headers)


def flatten_error_detail(detail: Any, prefix: str = "") -> List[str]:
    """Turn a nested DRF error ``detail`` into ``"field: message"`` strings.

    Nested list positions render as ``items[1].quantityInKilos``.
    """
    if isinstance(detail, dict):
        messages: List[str] = []
        for key, value in detail.items():
            if key == "non_field_errors":
                child = prefix
            elif isinstance(key, int):
                child = f"{prefix}[{key}]"
            else:
                child = f"{prefix}.{key}" if prefix else str(key)
            messages.extend(flatten_error_detail(value, child))
        return messages

    if isinstance(detail, list):
        messages = []
        for index, value in enumerate(detail):
            if isinstance(value, (dict, list)):
                messages.extend(flatten_error_detail(value, f"{prefix}[{index}]"))
            else:
                messages.extend(flatten_error_detail(value, prefix))
        return messages

    return [f"{prefix}: {detail}" if prefix else str(detail)]


def _domain_status(exc: Exception) -> Optional[int]:
    for exc_type, status_code in _DOMAIN_STATUS.items():
        if isinstance(exc, exc_type):
            return status_code
    return None


def _response_headers(exc: APIException) -> Dict[str, str]:
    headers = {}
    auth_header = getattr(exc, "auth_header", None)
    if auth_header:
        headers["WWW-Authenticate"] = auth_header
    wait = getattr(exc, "wait", None)
    if wait:
        headers["Retry-After"] = str(int(wait))
    return headers
