"""
Global Exception Middleware

Last-resort handler for faults that escape the service layer. Logs the
failure and answers with a 500 problem body; exception text is only
exposed in development.
"""
import logging
import os
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from userservice.modules.api_results import problem_response

logger = logging.getLogger("userservice.errors")


def is_development() -> bool:
    return os.getenv("APP_ENV", "production").lower() == "development"


class GlobalExceptionMiddleware(BaseHTTPMiddleware):

    def __init__(self, app, debug: Optional[bool] = None):
        super().__init__(app)
        self.debug = is_development() if debug is None else debug

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as e:
            logger.error(f"Unhandled exception in {request.url.path}: {e}", exc_info=True)
            return problem_response(
                status=500,
                detail=str(e) if self.debug else None,
                problem_type="internal-server-error",
            )
