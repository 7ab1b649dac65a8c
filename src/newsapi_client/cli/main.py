"""Entry point for the ``newsapi`` command."""

import asyncio
import logging
import sys
from collections.abc import Sequence

from newsapi_client import __version__
from newsapi_client.cli.args import CLIArgs, build_request, parse_args, require_fields
from newsapi_client.cli.commands import Command
from newsapi_client.cli.render import render, render_raw, write_output
from newsapi_client.client import NewsAPIClient
from newsapi_client.config import ClientConfig, get_api_key, load_config
from newsapi_client.errors import NewsAPIError

logger = logging.getLogger(__name__)

USAGE_HINT = "Use 'newsapi --help' for usage information"

HELP_TEXT = """\
NewsAPI Command Line Client

Usage:
  newsapi headlines [options]      Get top headlines
  newsapi sources [options]        Get news sources
  newsapi everything [options]     Search everything
  newsapi --help                   Show this help
  newsapi --version                Show version information

Commands may be abbreviated to any unambiguous prefix (h, s, e).

Environment:
  NEWSAPI_KEY                      Your NewsAPI key (required)

Options for 'headlines':
  --country=CODE                   Country code (e.g., us, gb, de)
  --category=CAT                   Category (business, entertainment, general,
                                   health, science, sports, technology)
  --sources=LIST                   Comma-separated source IDs
  --page-size=N                    Number of results (default: 20, max: 100)
  --page=N                         Page number (default: 1)

Options for 'sources':
  --country=CODE                   Country code
  --category=CAT                   Category filter
  --language=CODE                  Language code (e.g., en, es, fr)

Options for 'everything':
  --query=TEXT                     Search query (required)
  --search-in=LIST                 Comma-separated: title,description,content
  --sources=LIST                   Comma-separated source IDs
  --domains=LIST                   Comma-separated domains
  --exclude-domains=LIST           Comma-separated domains to exclude
  --from=DATE                      Start date (YYYY-MM-DD or ISO 8601 datetime)
  --to=DATE                        End date (YYYY-MM-DD or ISO 8601 datetime)
  --language=CODE                  Language code
  --sort-by=SORT                   Sort by: relevancy, popularity, publishedAt
  --page-size=N                    Number of results (default: 100, max: 100)
  --page=N                         Page number (default: 1)

Common options:
  --markdown                       Output as Markdown (default)
  --json                           Output JSON
  --pretty                         Pretty print JSON
  --output=FILE                    Write output to file
  --raw                            Render the upstream body without validating it
  --config=FILE                    YAML client config (base_url, timeout, verify_ssl)
  --debug                          Log request details

Examples:
  newsapi headlines --country=us --category=technology
  newsapi sources --language=en --category=business
  newsapi everything --query="AI" --from=2024-01-01 --to=2024-01-31
  newsapi headlines --country=us --json --output=news.json

For more information, visit https://newsapi.org/docs
This software is not affiliated with NewsAPI.org
"""


async def run(args: CLIArgs) -> None:
    """Issue the request for ``args.command`` and write the rendered result.

    Args:
        args: Parsed CLI arguments for an API command.
    """
    require_fields(args)
    config = load_config(args.config) if args.config else ClientConfig()
    request = build_request(args, get_api_key(config.api_key_env))
    client = NewsAPIClient(config)

    if args.raw:
        body = await client.pull_raw(request)
        output = render_raw(body, args.format)
    else:
        response = await client.pull(request)
        output = render(response, args.format)

    write_output(output, args.output)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    # httpx logs full request URLs, which carry the API key
    logging.getLogger("httpx").setLevel(logging.WARNING)
    if argv is None:
        argv = sys.argv[1:]

    try:
        args = parse_args(argv)
    except NewsAPIError as e:
        logger.error(f"Error: {e}")
        logger.error(USAGE_HINT)
        return 1

    if args.command is Command.HELP:
        print(HELP_TEXT)
        return 0
    if args.command is Command.VERSION:
        print(f"NewsAPI CLI version {__version__}")
        return 0

    if args.debug:
        logging.getLogger("newsapi_client").setLevel(logging.DEBUG)

    try:
        asyncio.run(run(args))
    except (NewsAPIError, OSError) as e:
        logger.error(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
