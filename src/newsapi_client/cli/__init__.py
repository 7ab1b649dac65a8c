"""Command-line front end for the NewsAPI client."""

from newsapi_client.cli.args import CLIArgs, build_request, parse_args, require_fields
from newsapi_client.cli.commands import Command, resolve_command
from newsapi_client.cli.main import main
from newsapi_client.cli.render import (
    OutputFormat,
    normalize_raw,
    render,
    render_markdown,
    render_raw,
    write_output,
)

__all__ = [
    "CLIArgs",
    "Command",
    "OutputFormat",
    "build_request",
    "main",
    "normalize_raw",
    "parse_args",
    "render",
    "render_markdown",
    "render_raw",
    "require_fields",
    "resolve_command",
    "write_output",
]
