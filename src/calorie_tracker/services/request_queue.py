"""Sequential request queue for rate-limited upstream calls."""

import asyncio
import logging
from collections import deque
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

_logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class _QueueTask:
    operation: Callable[[], Awaitable[Any]]
    future: asyncio.Future[Any]


@dataclass
class RequestQueue:
    """Run queued operations one at a time in FIFO order.

    After each operation finishes, and only if more work is waiting, the queue
    sleeps for ``min_delay_seconds`` before starting the next one. An error in
    one operation is delivered to its own caller and never affects the others.
    Queued operations cannot be cancelled; a caller that stops waiting only
    discards the outcome.
    """

    min_delay_seconds: float = 0.5
    _tasks: deque[_QueueTask] = field(default_factory=deque, init=False, repr=False)
    _processing: bool = field(default=False, init=False, repr=False)
    _drain_task: asyncio.Task[None] | None = field(
        default=None, init=False, repr=False
    )

    async def enqueue(self, operation: Callable[[], Awaitable[T]]) -> T:
        """Queue an operation and wait for its result."""
        future: asyncio.Future[T] = asyncio.get_running_loop().create_future()
        self._tasks.append(_QueueTask(operation=operation, future=future))
        if not self._processing:
            self._processing = True
            self._drain_task = asyncio.create_task(self._drain())
        return await future

    def pending_count(self) -> int:
        """Return the number of operations waiting to start."""
        return len(self._tasks)

    def is_processing(self) -> bool:
        """Return True while the queue is draining."""
        return self._processing

    async def _drain(self) -> None:
        try:
            while self._tasks:
                task = self._tasks.popleft()
                try:
                    result = await task.operation()
                except Exception as exc:
                    if not task.future.done():
                        task.future.set_exception(exc)
                else:
                    if not task.future.done():
                        task.future.set_result(result)
                if self._tasks:
                    await asyncio.sleep(self.min_delay_seconds)
        finally:
            self._processing = False
            _logger.debug("Request queue drained")
