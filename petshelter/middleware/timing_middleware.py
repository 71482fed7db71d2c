"""Server-Timing header middleware."""

import time
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from petshelter.utils.timing import Timing, reset_timing_store, start_timing_store


class TimingMiddleware(BaseHTTPMiddleware):
    """Collect per-request timings and report them in ``Server-Timing``."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        store, token = start_timing_store()
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        finally:
            reset_timing_store(token)

        total = Timing("global", (time.perf_counter() - start_time) * 1000)
        response.headers["Server-Timing"] = ", ".join(
            [total.header_value(), *(timing.header_value() for timing in store.timings)]
        )
        return response
