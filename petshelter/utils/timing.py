"""Per-request timing store for the Server-Timing header."""

import time
from contextlib import asynccontextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field


@dataclass
class Timing:
    name: str
    duration_ms: float

    def header_value(self) -> str:
        return f"{self.name};dur={self.duration_ms:.2f}"


@dataclass
class TimingStore:
    timings: list[Timing] = field(default_factory=list)

    def add(self, name: str, duration_ms: float) -> None:
        self.timings.append(Timing(name, duration_ms))

    def header_value(self) -> str:
        return ", ".join(timing.header_value() for timing in self.timings)


_current_store: ContextVar[TimingStore | None] = ContextVar("timing_store", default=None)


def start_timing_store() -> tuple[TimingStore, object]:
    """Bind a fresh store to the current context; returns it with the reset token."""
    store = TimingStore()
    token = _current_store.set(store)
    return store, token


def reset_timing_store(token) -> None:
    _current_store.reset(token)


def current_timing_store() -> TimingStore | None:
    return _current_store.get()


def record(name: str, duration_ms: float) -> None:
    """Add a timing to the active store; a no-op outside a request."""
    store = _current_store.get()
    if store is not None:
        store.add(name, duration_ms)


@asynccontextmanager
async def record_timing(model: str, operation: str):
    """Time a database operation as ``db-<model>-<operation>``, even when it fails."""
    start = time.perf_counter()
    try:
        yield
    finally:
        record(f"db-{model}-{operation}", (time.perf_counter() - start) * 1000)
