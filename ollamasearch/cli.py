"""Command-line entry point."""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import TextIO

import httpx
from loguru import logger

from ollamasearch import __version__
from ollamasearch.client import SearchClient
from ollamasearch.config import SearchConfig, load_config
from ollamasearch.errors import OllamaSearchError, UsageError
from ollamasearch.extract import iter_models, parse_document
from ollamasearch.query import build_query
from ollamasearch.render import render_results

USAGE = """\
Usage: ollamasearch <query>

Use "has:" to filter by capability. For example:

	ollamasearch "has:tools has:vision gemma"

The query may be given as one quoted argument or spread across several
arguments; both forms are parsed the same way.
"""


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports mistakes as ``UsageError``."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(USAGE)

    def format_usage(self) -> str:
        return USAGE

    def format_help(self) -> str:
        return USAGE


OPTIONS = frozenset({"-h", "--help", "--version"})


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="ollamasearch")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def split_args(argv: list[str]) -> tuple[list[str], list[str]]:
    """
    Separate the reserved options from query tokens.

    Anything else, including tokens that start with ``-``, is query text.
    Everything after ``--`` is query text.
    """
    options: list[str] = []
    tokens: list[str] = []
    for index, arg in enumerate(argv):
        if arg == "--":
            tokens.extend(argv[index + 1:])
            break
        if arg in OPTIONS:
            options.append(arg)
        else:
            tokens.append(arg)
    return options, tokens


def configure_logging(debug: bool) -> None:
    """Send log records to stderr; debug records only when ``debug`` is set."""
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if debug else "WARNING",
        format="{level}: {message}",
        colorize=False,
    )


async def run(
    tokens: list[str],
    *,
    config: SearchConfig,
    transport: httpx.AsyncBaseTransport | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Search once and print the results table. Returns the row count."""
    query = build_query(tokens)
    body = await SearchClient(config, transport=transport).fetch(query)
    document = parse_document(body)
    return render_results(iter_models(document), stdout or sys.stdout)


def main(
    argv: list[str] | None = None,
    *,
    config: SearchConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    """Run the CLI and return the process exit code.

    ``--help`` and ``--version`` exit through ``SystemExit`` like any argparse
    program.
    """
    try:
        options, tokens = split_args(sys.argv[1:] if argv is None else list(argv))
        build_parser().parse_args(options)
        if not tokens:
            raise UsageError(USAGE)

        config = config or load_config()
        configure_logging(config.debug)
        asyncio.run(run(tokens, config=config, transport=transport))
    except OllamaSearchError as e:
        message = str(e)
        sys.stderr.write(message if message.endswith("\n") else message + "\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
