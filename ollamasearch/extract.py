"""Extract model entries from the search results HTML."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from bs4 import BeautifulSoup, NavigableString, Tag
from loguru import logger

from ollamasearch.errors import ParseError
from ollamasearch.models import ModelResult

MODEL_ATTR = "x-test-model"
TITLE_ATTR = "x-test-search-response-title"
CAPABILITY_ATTR = "x-test-capability"
DESCRIPTION_TAG = "p"

Predicate = Callable[[Tag], bool]


def parse_document(body: bytes | str) -> BeautifulSoup:
    """Parse a response body with HTML5 tree construction rules.

    html5lib applies implied end tags, so an entry whose ``</li>`` is omitted
    still ends where the next ``<li>`` begins.
    """
    try:
        return BeautifulSoup(body, "html5lib")
    except Exception as e:
        raise ParseError(f"failed to parse search response: {e}") from e


def has_attr(name: str) -> Predicate:
    return lambda node: node.has_attr(name)


def is_tag(name: str) -> Predicate:
    return lambda node: node.name == name


def iter_elements(root: Tag, predicate: Predicate) -> Iterator[Tag]:
    """Yield descendants of ``root`` matching ``predicate``, in document order."""
    for node in root.descendants:
        if isinstance(node, Tag) and predicate(node):
            yield node


def find_first(root: Tag, predicate: Predicate) -> Tag | None:
    return next(iter_elements(root, predicate), None)


def text_of(node: Tag | None) -> str:
    """Return the stripped first child of ``node`` when that child is text."""
    if node is None or not node.contents:
        return ""
    first = node.contents[0]
    if isinstance(first, NavigableString):
        return first.strip()
    return ""


def _next_model(node: Tag) -> Tag | None:
    sibling = node.next_sibling
    while sibling is not None:
        if isinstance(sibling, Tag) and sibling.has_attr(MODEL_ATTR):
            return sibling
        sibling = sibling.next_sibling
    return None


def _read_entry(entry: Tag) -> ModelResult:
    # The markup has no dedicated description marker; the first <p> wins.
    capabilities = [text_of(node) for node in iter_elements(entry, has_attr(CAPABILITY_ATTR))]
    return ModelResult(
        name=text_of(find_first(entry, has_attr(TITLE_ATTR))),
        capabilities=tuple(sorted(capabilities)),
        description=text_of(find_first(entry, is_tag(DESCRIPTION_TAG))),
    )


def iter_models(document: Tag) -> Iterator[ModelResult]:
    """
    Yield one result per model entry.

    The first entry is the first element carrying the model marker. Later
    entries are found by following its sibling links, so markers nested inside
    an entry are never reported on their own.
    """
    entry = find_first(document, has_attr(MODEL_ATTR))
    if entry is None:
        logger.debug("No model entries found")

    while entry is not None:
        yield _read_entry(entry)
        entry = _next_model(entry)
