"""Request/Response logging middleware."""

import logging
import time
import uuid
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging all API requests and responses."""

    def __init__(
        self,
        app: Any,
        log_headers: bool = False,
        sensitive_headers: set[str] | None = None,
        exclude_paths: set[str] | None = None,
    ):
        """
        Initialize request logging middleware.

        Args:
            app: ASGI application
            log_headers: Whether to log headers
            sensitive_headers: Headers to redact when logging
            exclude_paths: Paths to exclude from logging (e.g., health checks)
        """
        super().__init__(app)
        self.log_headers = log_headers
        self.sensitive_headers = sensitive_headers or {
            "authorization",
            "cookie",
            "x-api-key",
        }
        self.exclude_paths = exclude_paths or {
            "/health",
            "/favicon.ico",
        }

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and response logging."""
        if request.url.path in self.exclude_paths:
            return await call_next(request)

        # Keep the caller's id for tracing across services
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.perf_counter()
        self._log_request(request, request_id)

        try:
            response = await call_next(request)
        except Exception as e:
            self._log_error(request, e, request_id, time.perf_counter() - start_time)
            raise

        process_time = time.perf_counter() - start_time
        self._log_response(request, response, request_id, process_time)

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.4f}"
        return response

    def _log_request(self, request: Request, request_id: str):
        log_data = {
            "event": "request_started",
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client_ip": self._get_client_ip(request),
            "user_agent": request.headers.get("user-agent"),
        }

        if self.log_headers:
            log_data["headers"] = self._filter_headers(dict(request.headers))

        logger.info(f"{request.method} {request.url.path}", extra=log_data)

    def _log_response(self, request: Request, response: Response, request_id: str, process_time: float):
        log_data = {
            "event": "request_completed",
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "process_time": f"{process_time:.4f}s",
            "user_id": getattr(request.state, "user_id", None),
        }

        message = f"{request.method} {request.url.path} -> {response.status_code}"
        if response.status_code >= 500:
            logger.error(message, extra=log_data)
        elif response.status_code >= 400:
            logger.warning(message, extra=log_data)
        else:
            logger.info(message, extra=log_data)

    def _log_error(self, request: Request, error: Exception, request_id: str, process_time: float):
        log_data = {
            "event": "request_failed",
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "error_type": type(error).__name__,
            "error_message": str(error),
            "process_time": f"{process_time:.4f}s",
        }

        logger.error(f"{request.method} {request.url.path} failed", extra=log_data, exc_info=True)

    def _get_client_ip(self, request: Request) -> str:
        """Get client IP address from request."""
        forwarded_for = request.headers.get("x-forwarded-for")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()

        real_ip = request.headers.get("x-real-ip")
        if real_ip:
            return real_ip

        if request.client:
            return request.client.host

        return "unknown"

    def _filter_headers(self, headers: dict[str, str]) -> dict[str, str]:
        return {
            key: "[REDACTED]" if key.lower() in self.sensitive_headers else value
            for key, value in headers.items()
        }


class PerformanceMiddleware(BaseHTTPMiddleware):
    """Warn about requests slower than a threshold."""

    def __init__(self, app: Any, slow_request_threshold: float = 1.0):
        """
        Args:
            app: ASGI application
            slow_request_threshold: Threshold for slow request logging (seconds)
        """
        super().__init__(app)
        self.slow_threshold = slow_request_threshold

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        response = await call_next(request)
        process_time = time.perf_counter() - start_time

        if process_time > self.slow_threshold:
            logger.warning(
                f"Slow request detected: {request.method} {request.url.path}",
                extra={
                    "event": "slow_request",
                    "method": request.method,
                    "path": request.url.path,
                    "process_time": f"{process_time:.4f}s",
                    "threshold": f"{self.slow_threshold}s",
                    "status_code": response.status_code,
                },
            )

        return response
