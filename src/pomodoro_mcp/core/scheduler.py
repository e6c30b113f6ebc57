"""Deferred completion scheduling.

A scheduler runs a callback once after a duration unless the returned
handle is cancelled first.  The timer state machine only talks to the
:class:`Scheduler` protocol, so tests can drive completions by hand.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)

Callback = Callable[[], None]


class CompletionHandle:
    """Cancelable reference to a scheduled callback.

    Wraps *callback* so it runs at most once, and never after
    :meth:`cancel`.  Cancelling is idempotent, including after the
    callback has already fired.
    """

    def __init__(self, callback: Callback) -> None:
        self._callback = callback
        self._fired = False
        self._cancelled = False
        self._cancel_hook: Optional[Callable[[], None]] = None

    @property
    def fired(self) -> bool:
        return self._fired

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def pending(self) -> bool:
        return not (self._fired or self._cancelled)

    def bind(self, cancel_hook: Callable[[], None]) -> None:
        """Attach the underlying backend's cancel function."""
        self._cancel_hook = cancel_hook

    def fire(self) -> None:
        """Run the callback unless it already ran or was cancelled."""
        if not self.pending:
            return
        self._fired = True
        self._callback()

    def cancel(self) -> None:
        if not self.pending:
            return
        self._cancelled = True
        if self._cancel_hook is not None:
            self._cancel_hook()


class Scheduler(Protocol):
    """Schedules a single callback after a duration in milliseconds."""

    def schedule(self, duration_ms: int, callback: Callback) -> CompletionHandle: ...

    def cancel(self, handle: CompletionHandle) -> None: ...


class AsyncioScheduler:
    """Scheduler backed by ``loop.call_later``.

    When no loop is given, the running loop is looked up at schedule
    time, so this must be used from code running on an event loop.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def schedule(self, duration_ms: int, callback: Callback) -> CompletionHandle:
        loop = self._loop if self._loop is not None else asyncio.get_running_loop()
        handle = CompletionHandle(callback)
        timer_handle = loop.call_later(duration_ms / 1000.0, handle.fire)
        handle.bind(timer_handle.cancel)
        logger.debug("Scheduled completion in %d ms", duration_ms)
        return handle

    def cancel(self, handle: CompletionHandle) -> None:
        handle.cancel()
