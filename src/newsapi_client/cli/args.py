"""Command-line argument parsing into a validated options bag."""

import argparse
from collections.abc import Sequence
from pathlib import Path
from typing import Any, NoReturn

from pydantic import BaseModel, Field

from newsapi_client.cli.commands import Command, resolve_command
from newsapi_client.cli.render import OutputFormat
from newsapi_client.data.enums import (
    NewsCategory,
    SearchIn,
    SortBy,
    parse_category,
    parse_search_in,
    parse_sort_by,
)
from newsapi_client.data.requests import (
    EverythingRequest,
    HeadlinesRequest,
    NewsRequest,
    SourcesRequest,
)
from newsapi_client.errors import ValidationError

DEFAULT_PAGE_SIZE = 20
EVERYTHING_PAGE_SIZE = 100


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    command: Command
    # headlines / sources
    country: str = ""
    category: NewsCategory = NewsCategory.GENERAL
    sources: list[str] = Field(default_factory=list)
    language: str = ""
    # everything
    query: str = ""
    search_in: list[SearchIn] = Field(default_factory=list)
    domains: list[str] = Field(default_factory=list)
    exclude_domains: list[str] = Field(default_factory=list)
    from_date: str = ""
    to_date: str = ""
    sort_by: SortBy = SortBy.PUBLISHED_AT
    # common
    page_size: int = DEFAULT_PAGE_SIZE
    page: int = 1
    format: OutputFormat = OutputFormat.MARKDOWN
    output: Path | None = None
    raw: bool = False
    config: Path | None = None
    debug: bool = False

    model_config = {"frozen": True}


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing usage and exiting."""

    def error(self, message: str) -> NoReturn:
        raise ValidationError(message)


def _build_parser() -> _ArgumentParser:
    parser = _ArgumentParser(prog="newsapi", add_help=False, allow_abbrev=False)
    parser.add_argument("--country")
    parser.add_argument("--category")
    parser.add_argument("--sources")
    parser.add_argument("--language")
    parser.add_argument("--query", "--q", "-q", dest="query")
    parser.add_argument("--search-in", "--searchin", dest="search_in")
    parser.add_argument("--domains")
    parser.add_argument("--exclude-domains", "--excludedomains", dest="exclude_domains")
    parser.add_argument("--from", dest="from_date")
    parser.add_argument("--to", dest="to_date")
    parser.add_argument("--sort-by", "--sortby", dest="sort_by")
    parser.add_argument("--page-size", "--pagesize", dest="page_size")
    parser.add_argument("--page")
    parser.add_argument(
        "--markdown", dest="format", action="store_const", const=OutputFormat.MARKDOWN
    )
    parser.add_argument(
        "--json", dest="format", action="store_const", const=OutputFormat.JSON
    )
    parser.add_argument(
        "--pretty", dest="format", action="store_const", const=OutputFormat.PRETTY
    )
    parser.add_argument("--output")
    parser.add_argument("--raw", action="store_true", default=None)
    parser.add_argument("--config")
    parser.add_argument("--debug", action="store_true", default=None)
    return parser


def _normalize_option(token: str) -> str:
    """Lowercase the name part of an option token, leaving any ``=value`` intact."""
    if not token.startswith("-"):
        return token
    name, sep, value = token.partition("=")
    return name.lower() + sep + value


def _split_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _parse_int(value: str, option: str) -> int:
    try:
        return int(value)
    except ValueError:
        msg = f"Invalid value for --{option}: {value}. Expected an integer"
        raise ValidationError(msg) from None


def parse_args(argv: Sequence[str]) -> CLIArgs:
    """Parse CLI tokens (without the program name) into CLIArgs.

    The first token selects the command; help and version stop parsing
    there. Remaining tokens are ``--name=value`` or ``--name value`` options.
    Per-command required fields are not checked here; see ``require_fields``.

    Raises:
        ValidationError: On an unknown command or option, a stray argument,
            or a value that fails to parse.
    """
    if not argv:
        return CLIArgs(command=Command.HELP)

    command = resolve_command(argv[0])
    if command is Command.UNKNOWN:
        msg = f"Unknown command: {argv[0]}"
        raise ValidationError(msg)
    if command in (Command.HELP, Command.VERSION):
        return CLIArgs(command=command)

    ns, extras = _build_parser().parse_known_args([_normalize_option(t) for t in argv[1:]])
    for extra in extras:
        if extra.startswith("-"):
            msg = f"Unknown option: {extra}"
        else:
            msg = f"Unexpected argument: {extra}"
        raise ValidationError(msg)

    values: dict[str, Any] = {"command": command}
    if command is Command.EVERYTHING:
        values["page_size"] = EVERYTHING_PAGE_SIZE

    for name in ("country", "language", "query", "from_date", "to_date"):
        if getattr(ns, name) is not None:
            values[name] = getattr(ns, name)
    for name in ("sources", "domains", "exclude_domains"):
        if getattr(ns, name) is not None:
            values[name] = _split_list(getattr(ns, name))
    for name in ("format", "output", "raw", "config", "debug"):
        if getattr(ns, name) is not None:
            values[name] = getattr(ns, name)

    if ns.category is not None:
        values["category"] = parse_category(ns.category)
    if ns.search_in is not None:
        values["search_in"] = parse_search_in(ns.search_in)
    if ns.sort_by is not None:
        values["sort_by"] = parse_sort_by(ns.sort_by)
    if ns.page_size is not None:
        values["page_size"] = _parse_int(ns.page_size, "page-size")
    if ns.page is not None:
        values["page"] = _parse_int(ns.page, "page")

    return CLIArgs(**values)


def require_fields(args: CLIArgs) -> None:
    """Check the per-command required options.

    Raises:
        ValidationError: If headlines has neither country nor sources, or
            everything has no query.
    """
    if args.command is Command.HEADLINES and not args.country and not args.sources:
        msg = "headlines command requires either --country or --sources"
        raise ValidationError(msg)
    if args.command is Command.EVERYTHING and not args.query:
        msg = "--query is required for 'everything' command"
        raise ValidationError(msg)


def build_request(args: CLIArgs, api_key: str) -> NewsRequest:
    """Turn parsed arguments into the request model for their command.

    Call ``require_fields`` first; this does not repeat the check.
    """
    if args.command is Command.HEADLINES:
        return HeadlinesRequest(
            api_key=api_key,
            country=args.country,
            category=args.category,
            sources=tuple(args.sources),
            page_size=args.page_size,
            page=args.page,
        )
    if args.command is Command.SOURCES:
        return SourcesRequest(
            api_key=api_key,
            category=args.category,
            language=args.language,
            country=args.country,
        )
    if args.command is Command.EVERYTHING:
        return EverythingRequest(
            api_key=api_key,
            q=args.query,
            search_in=tuple(args.search_in),
            sources=tuple(args.sources),
            domains=tuple(args.domains),
            exclude_domains=tuple(args.exclude_domains),
            from_date=args.from_date,
            to_date=args.to_date,
            language=args.language,
            sort_by=args.sort_by,
            page_size=args.page_size,
            page=args.page,
        )
    msg = f"Command {args.command} does not issue a request"
    raise ValueError(msg)
