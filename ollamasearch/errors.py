"""Error types surfaced by ollamasearch."""


class OllamaSearchError(Exception):
    """Base class for every failure the CLI reports."""


class UsageError(OllamaSearchError):
    """Raised when the command line is invalid. The message is the usage block."""


class NetworkError(OllamaSearchError):
    """Raised when the search request fails in transport or runs out of time."""


class HTTPStatusError(OllamaSearchError):
    """Raised when the search endpoint answers with a non-200 status."""

    def __init__(self, status_code: int, reason: str = ""):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"HTTP error: {status_code} {reason}".rstrip())


class ParseError(OllamaSearchError):
    """Raised when the response body cannot be parsed as HTML at all."""


class ConfigError(OllamaSearchError):
    """Raised when an environment setting has an invalid value."""
