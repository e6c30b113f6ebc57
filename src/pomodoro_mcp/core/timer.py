"""Timer core -- a single pomodoro countdown driven by an injected scheduler."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from pomodoro_mcp.constants import (
    MSG_COMPLETE,
    MSG_INVALID_DURATION,
    MSG_NOT_RUNNING,
    MSG_STARTED,
    MSG_STOPPED,
    MSG_UPDATED,
)
from pomodoro_mcp.core.clock import Clock, monotonic_ms
from pomodoro_mcp.core.scheduler import AsyncioScheduler, CompletionHandle, Scheduler
from pomodoro_mcp.core.snapshot import Snapshot, build_snapshot, compute_remaining

logger = logging.getLogger(__name__)

_MS_PER_MINUTE = 60_000
_MS_PER_SECOND = 1_000


class InvalidDurationError(ValueError):
    """Raised when a requested duration is not greater than zero."""


@dataclass
class TimerState:
    """Mutable state of the one process-wide timer.

    ``remaining_ms`` is stale while ``is_running`` is true; read it through
    :func:`~pomodoro_mcp.core.snapshot.compute_remaining`.
    """

    duration_ms: int = 0
    remaining_ms: int = 0
    started_at: Optional[int] = None
    is_running: bool = False
    pending_completion: Optional[CompletionHandle] = None


def duration_from(minutes: Optional[int] = None, seconds: Optional[int] = None) -> int:
    """Convert *minutes* and *seconds* (missing values count as 0) to ms.

    Raises ``InvalidDurationError`` unless the result is greater than zero.
    """
    minutes = minutes or 0
    seconds = seconds or 0
    for name, value in (("minutes", minutes), ("seconds", seconds)):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
        if value < 0:
            raise InvalidDurationError(MSG_INVALID_DURATION)
    duration_ms = minutes * _MS_PER_MINUTE + seconds * _MS_PER_SECOND
    if duration_ms <= 0:
        raise InvalidDurationError(MSG_INVALID_DURATION)
    return duration_ms


class PomodoroTimer:
    """State machine for a single countdown timer.

    Two states: idle and running.  Every mutating operation either applies
    its whole transition or raises before touching the state, and any
    previously scheduled completion is cancelled before a new one is
    installed, so at most one completion is ever pending.
    """

    def __init__(self, clock: Clock = monotonic_ms, scheduler: Optional[Scheduler] = None) -> None:
        self._clock = clock
        self._scheduler: Scheduler = scheduler if scheduler is not None else AsyncioScheduler()
        self._state = TimerState()

    @property
    def state(self) -> TimerState:
        return self._state

    # -- public interface ----------------------------------------------------

    def start(self, minutes: Optional[int] = None, seconds: Optional[int] = None) -> str:
        """Start (or restart) the countdown for the given duration."""
        duration_ms = duration_from(minutes, seconds)

        handle = self._scheduler.schedule(duration_ms, self._complete)
        self._cancel_pending()
        self._state.duration_ms = duration_ms
        self._state.remaining_ms = duration_ms
        self._begin_running(handle)
        logger.debug("Timer started for %d ms", duration_ms)
        return MSG_STARTED

    def stop(self) -> str:
        """Freeze the countdown at its current remaining time."""
        if not self._state.is_running:
            return MSG_NOT_RUNNING

        remaining = compute_remaining(self._state, self._clock())
        self._cancel_pending()
        self._state.remaining_ms = remaining
        self._state.is_running = False
        self._state.started_at = None
        logger.debug("Timer stopped with %d ms remaining", remaining)
        return MSG_STOPPED

    def edit(self, minutes: Optional[int] = None, seconds: Optional[int] = None) -> str:
        """Replace the configured duration.

        A running timer restarts at the full new duration; an idle timer
        stays idle with the new duration loaded as its remaining time.
        """
        duration_ms = duration_from(minutes, seconds)

        was_running = self._state.is_running
        handle = self._scheduler.schedule(duration_ms, self._complete) if was_running else None
        self._cancel_pending()
        self._state.duration_ms = duration_ms
        self._state.remaining_ms = duration_ms
        if handle is not None:
            self._begin_running(handle)
        else:
            self._state.started_at = None
        logger.debug("Timer duration set to %d ms (running=%s)", duration_ms, was_running)
        return MSG_UPDATED

    def snapshot(self) -> Snapshot:
        """Return the current snapshot without mutating anything."""
        return build_snapshot(self._state, self._clock())

    get = snapshot

    # -- private helpers -----------------------------------------------------

    def _begin_running(self, handle: CompletionHandle) -> None:
        """Record the start time and enter the running state with *handle* pending.

        The completion is scheduled by the caller before any field changes,
        so a failing scheduler leaves the state untouched.
        """
        self._state.started_at = self._clock()
        self._state.is_running = True
        self._state.pending_completion = handle

    def _cancel_pending(self) -> None:
        handle = self._state.pending_completion
        if handle is not None:
            self._scheduler.cancel(handle)
            self._state.pending_completion = None

    def _complete(self) -> None:
        self._state.is_running = False
        self._state.remaining_ms = 0
        self._state.started_at = None
        self._state.pending_completion = None
        logger.info(MSG_COMPLETE)
