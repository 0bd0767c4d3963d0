"""Request logging middleware with correlation IDs"""

import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from commerce_service.api.v1.modules import API_MODULES
from commerce_service.core.config import logger

CORRELATION_HEADER = "X-Correlation-ID"


def module_for_path(path: str) -> str:
    """Name of the API module serving path, "service" for top-level routes."""
    for module in API_MODULES:
        if path == module.prefix or path.startswith(module.prefix + "/"):
            return module.name
    return "service"


class StructuredLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs every request with its API module and a correlation ID.

    A correlation ID sent by the caller is kept, otherwise a new one is
    generated. Either way it is echoed in the response header.
    """

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
        request.state.correlation_id = correlation_id

        module = module_for_path(request.url.path)
        context = {
            "correlation_id": correlation_id,
            "module": module,
            "method": request.method,
            "path": request.url.path,
            "client_ip": request.client.host if request.client else "unknown",
        }
        start_time = time.perf_counter()

        logger.info(f"[{module}] {request.method} {request.url.path} started", extra=context)

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"[{module}] {request.method} {request.url.path} failed: {e}",
                extra={**context, "duration_ms": self._elapsed_ms(start_time)},
                exc_info=True,
            )
            raise

        logger.info(
            f"[{module}] {request.method} {request.url.path} -> {response.status_code}",
            extra={
                **context,
                "status_code": response.status_code,
                "duration_ms": self._elapsed_ms(start_time),
            },
        )

        response.headers[CORRELATION_HEADER] = correlation_id
        return response

    @staticmethod
    def _elapsed_ms(start_time: float) -> float:
        return round((time.perf_counter() - start_time) * 1000, 2)
