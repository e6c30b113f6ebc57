"""pomodoro-mcp: a single pomodoro timer exposed as MCP tools over HTTP."""

__version__ = "0.1.0"
