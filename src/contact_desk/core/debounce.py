# src/contact_desk/core/debounce.py

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class Debouncer:
    """
    Collapse a burst of calls into one trailing call.

    Each call (re)starts a quiet window of wait_seconds on the running event loop;
    when it elapses, func runs once with the arguments of the latest call.
    Coroutine functions are scheduled as tasks. There is no cancel(): a pending
    call is only ever superseded by the next one.

    Must be called from inside a running asyncio loop.
    """

    def __init__(self, func: Callable[..., Any], wait_seconds: float) -> None:
        self._func = func
        self._wait = max(0.0, float(wait_seconds))
        self._handle: asyncio.TimerHandle | None = None
        self._tasks: set[asyncio.Task[Any]] = set()

    @property
    def wait_seconds(self) -> float:
        return self._wait

    @property
    def pending(self) -> bool:
        """True while a trailing call is scheduled or still running."""
        return self._handle is not None or bool(self._tasks)

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        loop = asyncio.get_running_loop()
        if self._handle is not None:
            self._handle.cancel()
        self._handle = loop.call_later(self._wait, self._fire, args, kwargs)

    def _fire(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        self._handle = None
        try:
            result = self._func(*args, **kwargs)
        except Exception:
            logger.exception("Debounced call failed func=%r", self._func)
            return

        if inspect.isawaitable(result):
            task = asyncio.ensure_future(result)
            self._tasks.add(task)
            task.add_done_callback(self._on_task_done)

    def _on_task_done(self, task: asyncio.Task[Any]) -> None:
        self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error("Debounced coroutine failed", exc_info=task.exception())


def debounce(func: Callable[..., Any], wait_seconds: float) -> Debouncer:
    return Debouncer(func, wait_seconds)
