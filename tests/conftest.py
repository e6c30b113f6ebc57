"""Shared fixtures: a hand-driven clock and scheduler."""

from __future__ import annotations

from typing import List, Tuple

import pytest

from pomodoro_mcp.core.scheduler import Callback, CompletionHandle
from pomodoro_mcp.core.timer import PomodoroTimer


class FakeClock:
    """Clock returning a settable millisecond reading."""

    def __init__(self, now: int = 1_000_000) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now


class ManualScheduler:
    """Scheduler whose completions fire only when :meth:`advance` is called."""

    def __init__(self, clock: FakeClock) -> None:
        self._clock = clock
        self.scheduled: List[Tuple[int, CompletionHandle]] = []
        self.fired: List[int] = []

    def schedule(self, duration_ms: int, callback: Callback) -> CompletionHandle:
        handle = CompletionHandle(callback)
        self.scheduled.append((self._clock.now + duration_ms, handle))
        return handle

    def cancel(self, handle: CompletionHandle) -> None:
        handle.cancel()

    @property
    def pending(self) -> List[CompletionHandle]:
        return [handle for _, handle in self.scheduled if handle.pending]

    def advance(self, ms: int) -> None:
        """Move the clock forward *ms*, firing due completions in order."""
        target = self._clock.now + ms
        for due, handle in sorted(self.scheduled, key=lambda item: item[0]):
            if due <= target and handle.pending:
                self._clock.now = due
                handle.fire()
                self.fired.append(due)
        self._clock.now = target


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def scheduler(clock: FakeClock) -> ManualScheduler:
    return ManualScheduler(clock)


@pytest.fixture()
def timer(clock: FakeClock, scheduler: ManualScheduler) -> PomodoroTimer:
    return PomodoroTimer(clock=clock, scheduler=scheduler)
