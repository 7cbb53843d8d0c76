"""
API Result Mapping

Translates service Results into HTTP responses. Failures become
``application/problem+json`` bodies whose status is derived from the
error type.
"""
from http import HTTPStatus
from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from userservice.core.errors import Error, ErrorType
from userservice.core.result import Result

PROBLEM_MEDIA_TYPE = "application/problem+json"

STATUS_BY_ERROR_TYPE = {
    ErrorType.VALIDATION: HTTPStatus.BAD_REQUEST,
    ErrorType.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorType.CONFLICT: HTTPStatus.CONFLICT,
    ErrorType.UNAUTHORIZED: HTTPStatus.UNAUTHORIZED,
}


def status_for(error: Optional[Error]) -> int:
    if error is None:
        return HTTPStatus.INTERNAL_SERVER_ERROR.value
    return STATUS_BY_ERROR_TYPE.get(error.type, HTTPStatus.INTERNAL_SERVER_ERROR).value


def problem_response(status: int, detail: Optional[str], problem_type: str, **extra: Any) -> JSONResponse:
    body = {
        "type": problem_type,
        "title": HTTPStatus(status).phrase,
        "status": status,
        "detail": detail,
    }
    body.update(extra)
    return JSONResponse(content=body, status_code=status, media_type=PROBLEM_MEDIA_TYPE)


def to_response(result: Result) -> Response:
    """
    Map a Result to a response.

    - success without a value -> 204
    - success with a value -> 200 with the value as JSON
    - failure -> problem response, detail is the error message
    """
    if result.is_success:
        if result.value is None:
            return Response(status_code=HTTPStatus.NO_CONTENT.value)
        return JSONResponse(content=jsonable_encoder(result.value), status_code=HTTPStatus.OK.value)

    error = result.error
    return problem_response(
        status=status_for(error),
        detail=error.message,
        problem_type=error.type.value,
        code=error.code,
    )
