import uuid
from contextvars import ContextVar

from aws_lambda_powertools import Logger
from fastapi.requests import Request
from fastapi.responses import Response
from starlette.middleware.base import (BaseHTTPMiddleware,
                                       RequestResponseEndpoint)
from starlette.types import ASGIApp

from app import settings

X_CORRELATION_ID = "X-Correlation-ID"

correlation_id: ContextVar[str | None] = ContextVar(X_CORRELATION_ID, default=None)
logger = Logger(service=settings.app_name, utc=True)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        token = correlation_id.set(
            request.headers.get(X_CORRELATION_ID) or str(uuid.uuid4())
        )
        logger.set_correlation_id(correlation_id.get())
        try:
            response = await call_next(request)
            response.headers[X_CORRELATION_ID] = correlation_id.get()
            return response
        finally:
            correlation_id.reset(token)
