"""Shared search result models."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ModelResult:
    """One model entry scraped from the search results."""

    name: str
    capabilities: tuple[str, ...] = ()
    description: str = ""
