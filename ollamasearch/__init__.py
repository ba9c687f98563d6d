"""Search the Ollama model library from the command line."""

__version__ = "0.1.0"

from ollamasearch.client import SearchClient
from ollamasearch.config import SearchConfig
from ollamasearch.errors import (
    ConfigError,
    HTTPStatusError,
    NetworkError,
    OllamaSearchError,
    ParseError,
    UsageError,
)
from ollamasearch.extract import iter_models, parse_document
from ollamasearch.models import ModelResult
from ollamasearch.query import Query, build_query
from ollamasearch.render import TableWriter, render_results

__all__ = [
    "ConfigError",
    "HTTPStatusError",
    "ModelResult",
    "NetworkError",
    "OllamaSearchError",
    "ParseError",
    "Query",
    "SearchClient",
    "SearchConfig",
    "TableWriter",
    "UsageError",
    "build_query",
    "iter_models",
    "parse_document",
    "render_results",
]
