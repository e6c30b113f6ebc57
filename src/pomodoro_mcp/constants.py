"""Fixed identifiers and user-facing messages."""

SERVER_NAME = "pomodoro-app"

MCP_PATH = "/mcp"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8787

WIDGET_NAME = "pomodoro-widget"
WIDGET_URI = "ui://widget/pomodoro.html"
WIDGET_MIME_TYPE = "text/html;profile=mcp-app"
WIDGET_FILE = "pomodoro-widget.html"

MSG_STARTED = "Timer started."
MSG_STOPPED = "Timer stopped."
MSG_UPDATED = "Timer updated."
MSG_NOT_RUNNING = "Timer is not running."
MSG_INVALID_DURATION = "Provide a duration greater than 0."
MSG_COMPLETE = "Pomodoro complete."
