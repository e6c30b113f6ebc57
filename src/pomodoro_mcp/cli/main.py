"""CLI entry point for pomodoro-mcp.

Uses Click to expose the ``pomodoro-mcp`` command group; ``serve`` runs
the MCP server over HTTP with uvicorn.
"""

from __future__ import annotations

import logging

import click
import uvicorn

import pomodoro_mcp
from pomodoro_mcp.constants import DEFAULT_HOST, DEFAULT_PORT, MCP_PATH
from pomodoro_mcp.logging_config import setup_logging
from pomodoro_mcp.server.app import create_app

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=pomodoro_mcp.__version__, prog_name="pomodoro-mcp")
def cli() -> None:
    """pomodoro-mcp: a pomodoro timer served as MCP tools."""


@cli.command()
@click.option("--host", envvar="HOST", default=DEFAULT_HOST, show_default=True)
@click.option("--port", envvar="PORT", type=int, default=DEFAULT_PORT, show_default=True)
@click.option(
    "--log-level",
    envvar="LOG_LEVEL",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    show_default=True,
)
def serve(host: str, port: int, log_level: str) -> None:
    """Serve the timer tools over streamable HTTP."""
    setup_logging(log_level)
    app = create_app(host=host)
    logger.info("Pomodoro MCP server listening on http://localhost:%d%s", port, MCP_PATH)
    uvicorn.run(app, host=host, port=port, log_level=log_level.lower())
