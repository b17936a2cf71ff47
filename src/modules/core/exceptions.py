"""DRF exception handler.

DRF's own ``APIException`` subclasses (malformed JSON, unsupported
method, ...) keep the framework's standard responses.  Anything else
that escapes a view is logged with its traceback and reported to the
client as an opaque HTTP 500 without internal details.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def api_exception_handler(
    exc: Exception, context: Dict[str, Any]
) -> Optional[Response]:
    response = exception_handler(exc, context)
    if response is not None:
        return response

    set_rollback()
    view = context.get("view")
    logger.error(
        "request.unhandled_exception",
        view=type(view).__name__ if view is not None else None,
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    return Response(
        {"error": INTERNAL_ERROR_MESSAGE},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
