"""Snapshot builder -- pure views of the timer state at a given instant."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict

if TYPE_CHECKING:
    from pomodoro_mcp.core.timer import TimerState


@dataclass(frozen=True)
class Snapshot:
    """Point-in-time, read-only view of the timer."""

    is_running: bool
    duration_ms: int
    remaining_ms: int
    remaining_seconds: int

    def to_dict(self) -> Dict[str, object]:
        """Return the wire representation with camelCase keys."""
        return {
            "isRunning": self.is_running,
            "durationMs": self.duration_ms,
            "remainingMs": self.remaining_ms,
            "remainingSeconds": self.remaining_seconds,
        }


def compute_remaining(state: TimerState, now: int) -> int:
    """Return the remaining milliseconds of *state* at clock reading *now*.

    The stored ``remaining_ms`` is only authoritative while idle; a running
    timer always derives it from elapsed time.
    """
    if not state.is_running or state.started_at is None:
        return state.remaining_ms
    return max(state.duration_ms - (now - state.started_at), 0)


def build_snapshot(state: TimerState, now: int) -> Snapshot:
    remaining_ms = compute_remaining(state, now)
    return Snapshot(
        is_running=state.is_running,
        duration_ms=state.duration_ms,
        remaining_ms=remaining_ms,
        remaining_seconds=-(-remaining_ms // 1000),
    )
