"""Build a `MarkupDocument` from HTML text."""

import logging
from html.parser import HTMLParser
from pathlib import Path
from typing import Optional

from .node import MarkupDocument, MarkupNode

logger = logging.getLogger(__name__)

VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "source", "track", "wbr",
})


class _TreeBuilder(HTMLParser):
    def __init__(self, document: MarkupDocument) -> None:
        super().__init__(convert_charrefs=True)
        self.document = document
        self._stack: list[MarkupNode] = [document]

    @property
    def _current(self) -> MarkupNode:
        return self._stack[-1]

    def handle_starttag(self, tag, attrs):
        node = self.document.create_element(tag, {name: value for name, value in attrs})
        self._current.append_child(node)
        if tag not in VOID_ELEMENTS:
            self._stack.append(node)

    def handle_startendtag(self, tag, attrs):
        node = self.document.create_element(tag, {name: value for name, value in attrs})
        self._current.append_child(node)

    def handle_endtag(self, tag):
        # Pop to the nearest open element with this tag; stray end tags are ignored
        for index in range(len(self._stack) - 1, 0, -1):
            if self._stack[index].tag == tag:
                del self._stack[index:]
                return
        logger.debug(f"Ignoring unmatched end tag </{tag}>")

    def handle_data(self, data):
        if data.strip():
            self._current.text += data.strip()


def parse_markup(text: str, document: Optional[MarkupDocument] = None) -> MarkupDocument:
    """
    Parse HTML into a markup tree.

    Args:
        text: HTML source
        document: Existing document to append into (a new one by default)

    Returns:
        The document holding the parsed nodes
    """
    document = document if document is not None else MarkupDocument()
    builder = _TreeBuilder(document)
    builder.feed(text)
    builder.close()
    return document


def parse_markup_file(path: Path) -> MarkupDocument:
    """Read and parse an HTML file."""
    logger.debug(f"Parsing markup file {path}")
    return parse_markup(path.read_text(encoding="utf-8"))
