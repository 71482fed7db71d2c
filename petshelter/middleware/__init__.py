"""HTTP middleware and exception handlers."""

from .exception_handler import register_exception_handlers
from .logging_middleware import PerformanceMiddleware, RequestLoggingMiddleware
from .timing_middleware import TimingMiddleware

__all__ = [
    "PerformanceMiddleware",
    "RequestLoggingMiddleware",
    "TimingMiddleware",
    "register_exception_handlers",
]
