"""Application search – stale-response protection for rapidly re-triggered searches.

Each trigger (page change, filter change, debounced keystroke, refresh) takes a
new generation number; a response is applied only if no newer generation has
been applied since.  In-flight HTTP calls are never cancelled: a stale result
is simply discarded when it arrives.
"""
from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Generic, TypeVar

from scoped_search.observability.logging import get_logger

T = TypeVar("T")

_log = get_logger(__name__)


class GenerationGuard:
    """Monotonic request generations with latest-applied bookkeeping."""

    def __init__(self) -> None:
        self._issued = 0
        self._applied = 0

    @property
    def latest(self) -> int:
        return self._issued

    @property
    def applied(self) -> int:
        return self._applied

    def next(self) -> int:
        self._issued += 1
        return self._issued

    def is_current(self, generation: int) -> bool:
        """True while no newer generation has been issued."""
        return generation == self._issued

    def is_stale(self, generation: int) -> bool:
        return generation < self._applied

    def apply(self, generation: int, fn: Callable[[], Any]) -> bool:
        """Run *fn* unless a newer generation was already applied."""
        if self.is_stale(generation):
            _log.debug("search.stale_response_discarded", generation=generation, applied=self._applied)
            return False
        self._applied = generation
        fn()
        return True


class LatestOnly(Generic[T]):
    """Run one coroutine per trigger and deliver only non-stale results."""

    def __init__(self, on_result: Callable[[T], Any]) -> None:
        self._guard = GenerationGuard()
        self._on_result = on_result

    @property
    def guard(self) -> GenerationGuard:
        return self._guard

    async def run(self, call: Callable[[], Awaitable[T]]) -> bool:
        generation = self._guard.next()
        result = await call()
        return self._guard.apply(generation, lambda: self._on_result(result))


class Debouncer:
    """Collapse rapid triggers: only the last one within *delay* seconds fires.

    Debounce windows are a caller policy (the portal uses 300 ms to 3 s
    depending on the control).
    """

    def __init__(self, delay: float) -> None:
        self._delay = delay
        self._task: asyncio.Task[Any] | None = None

    def trigger(self, fn: Callable[[], Awaitable[Any]]) -> asyncio.Task[Any]:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = asyncio.ensure_future(self._fire(fn))
        return self._task

    async def _fire(self, fn: Callable[[], Awaitable[Any]]) -> Any:
        await asyncio.sleep(self._delay)
        return await fn()

    async def flush(self) -> Any:
        """Wait for the pending trigger (if any) and return its result."""
        if self._task is None:
            return None
        return await self._task


__all__ = ["Debouncer", "GenerationGuard", "LatestOnly"]
