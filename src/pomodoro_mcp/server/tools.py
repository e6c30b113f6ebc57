"""Tool handlers -- map MCP tool calls onto the timer state machine.

Each handler returns a ``CallToolResult`` carrying the optional message as
text content and the timer snapshot as structured content.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from mcp.types import CallToolResult, TextContent

from pomodoro_mcp.core.timer import InvalidDurationError, PomodoroTimer

logger = logging.getLogger(__name__)


def reply(timer: PomodoroTimer, message: Optional[str] = None) -> CallToolResult:
    """Build a tool result from the timer's current snapshot."""
    content = [TextContent(type="text", text=message)] if message else []
    return CallToolResult(content=content, structuredContent=timer.snapshot().to_dict())


def _run(timer: PomodoroTimer, action: Callable[[], str]) -> CallToolResult:
    """Execute *action*, reporting ``InvalidDurationError`` as a message.

    The timer is untouched when the action raises, so the reply carries the
    unchanged snapshot.
    """
    try:
        message = action()
    except InvalidDurationError as exc:
        logger.info("Rejected duration: %s", exc)
        message = str(exc)
    return reply(timer, message)


def start_timer(
    timer: PomodoroTimer, minutes: Optional[int] = None, seconds: Optional[int] = None
) -> CallToolResult:
    return _run(timer, lambda: timer.start(minutes, seconds))


def stop_timer(timer: PomodoroTimer) -> CallToolResult:
    return _run(timer, timer.stop)


def edit_timer(
    timer: PomodoroTimer, minutes: Optional[int] = None, seconds: Optional[int] = None
) -> CallToolResult:
    return _run(timer, lambda: timer.edit(minutes, seconds))


def get_timer(timer: PomodoroTimer) -> CallToolResult:
    return reply(timer)
