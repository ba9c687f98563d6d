"""Turn command-line text into a search query."""

from collections.abc import Iterable
from dataclasses import dataclass

CAPABILITY_PREFIX = "has:"


@dataclass(frozen=True, slots=True)
class Query:
    """Free search text plus the capability filters picked with ``has:``."""

    text: str = ""
    capabilities: tuple[str, ...] = ()


def build_query(args: str | Iterable[str]) -> Query:
    """
    Build a query from one combined string or a list of arguments.

    Every argument is split on whitespace, so ``"has:tools gemma"`` and
    ``["has:tools", "gemma"]`` produce the same query.
    """
    if isinstance(args, str):
        args = [args]

    words: list[str] = []
    capabilities: list[str] = []
    for arg in args:
        for token in arg.split():
            if token.startswith(CAPABILITY_PREFIX):
                capabilities.append(token[len(CAPABILITY_PREFIX):])
            else:
                words.append(token)

    return Query(text=" ".join(words), capabilities=tuple(capabilities))
