"""MCP server assembly: tool registration, the widget resource, and the HTTP app."""

from __future__ import annotations

from importlib import resources
from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult
from pydantic import Field
from starlette.applications import Starlette
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from pomodoro_mcp.constants import (
    DEFAULT_HOST,
    MCP_PATH,
    SERVER_NAME,
    WIDGET_FILE,
    WIDGET_MIME_TYPE,
    WIDGET_NAME,
    WIDGET_URI,
)
from pomodoro_mcp.core.timer import PomodoroTimer
from pomodoro_mcp.server import tools

_WIDGET_META = {"ui": {"resourceUri": WIDGET_URI}}

Minutes = Annotated[Optional[int], Field(ge=0, description="Whole minutes.")]
Seconds = Annotated[Optional[int], Field(ge=0, description="Whole seconds.")]


def load_widget() -> str:
    """Return the widget HTML shipped with the package."""
    return resources.files("pomodoro_mcp.server").joinpath("static", WIDGET_FILE).read_text(
        encoding="utf-8"
    )


def create_server(timer: PomodoroTimer, host: str = DEFAULT_HOST) -> FastMCP:
    """Build the MCP server whose tools all operate on *timer*."""
    server = FastMCP(
        SERVER_NAME,
        host=host,
        stateless_http=True,
        json_response=True,
        streamable_http_path=MCP_PATH,
    )
    widget_html = load_widget()

    @server.resource(WIDGET_URI, name=WIDGET_NAME, mime_type=WIDGET_MIME_TYPE)
    def pomodoro_widget() -> str:
        return widget_html

    @server.tool(
        name="start_timer",
        title="Start timer",
        description="Starts a Pomodoro timer with minutes or seconds.",
        meta=_WIDGET_META,
        structured_output=False,
    )
    async def start_timer(minutes: Minutes = None, seconds: Seconds = None) -> CallToolResult:
        return tools.start_timer(timer, minutes, seconds)

    @server.tool(
        name="stop_timer",
        title="Stop timer",
        description="Stops the current timer.",
        meta=_WIDGET_META,
        structured_output=False,
    )
    async def stop_timer() -> CallToolResult:
        return tools.stop_timer(timer)

    @server.tool(
        name="edit_timer",
        title="Edit timer",
        description="Changes the timer duration.",
        meta=_WIDGET_META,
        structured_output=False,
    )
    async def edit_timer(minutes: Minutes = None, seconds: Seconds = None) -> CallToolResult:
        return tools.edit_timer(timer, minutes, seconds)

    @server.tool(
        name="get_timer",
        title="Get timer",
        description="Returns the current timer state.",
        meta=_WIDGET_META,
        structured_output=False,
    )
    async def get_timer() -> CallToolResult:
        return tools.get_timer(timer)

    @server.custom_route("/", methods=["GET"])
    async def index(request: Request) -> PlainTextResponse:
        return PlainTextResponse("Pomodoro MCP server")

    return server


def create_app(timer: Optional[PomodoroTimer] = None, host: str = DEFAULT_HOST) -> Starlette:
    """Return the ASGI app serving the MCP endpoint with CORS enabled."""
    server = create_server(timer if timer is not None else PomodoroTimer(), host=host)
    app = server.streamable_http_app()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["content-type", "mcp-session-id"],
        expose_headers=["Mcp-Session-Id"],
    )
    return app
