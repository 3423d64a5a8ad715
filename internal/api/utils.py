"""
API utility functions for response formatting and error mapping.
"""

from typing import Any, Callable, Dict, Optional

from fastapi import Response, status
from fastapi.responses import JSONResponse

from domain.errors import ErrorKind, ServiceError, ServiceResult

DEFAULT_ERROR_MESSAGE = "Internal server error"

# Malformed bodies stay on 500, matching the behaviour clients already see
ERROR_STATUS: Dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.MALFORMED_INPUT: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(message: Optional[str]) -> Dict[str, str]:
    """
    Create an error payload.

    Args:
        message: Error message; empty or None falls back to a generic message

    Returns:
        Error payload dictionary
    """
    return {"message": message or DEFAULT_ERROR_MESSAGE}


def status_for(kind: ErrorKind) -> int:
    """HTTP status code for an error kind."""
    return ERROR_STATUS.get(kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


def error_json(error: ServiceError) -> JSONResponse:
    """Render a classified failure as ``{message}`` with its status code."""
    return JSONResponse(
        status_code=status_for(error.kind), content=error_response(error.message)
    )


def result_response(
    result: ServiceResult,
    success_status: int = status.HTTP_200_OK,
    serialize: Optional[Callable[[Any], Any]] = None,
) -> Response:
    """
    Convert a ServiceResult into an HTTP response.

    Args:
        result: Outcome returned by a service
        success_status: Status code used when the result is ok
        serialize: Converts the result value to JSON-compatible data

    Returns:
        JSONResponse for values and errors, an empty Response for 204
    """
    if not result.is_ok:
        return error_json(result.error)

    if success_status == status.HTTP_204_NO_CONTENT:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    content = serialize(result.value) if serialize else result.value
    return JSONResponse(status_code=success_status, content=content)
