"""Process-wide headless markup environment.

Widget code that needs a document to create elements in (and tests that build
trees by hand) uses the document provisioned here. It is created lazily, on
first use, exactly once per process.
"""

import logging
from threading import Lock
from typing import Optional

from .node import MarkupDocument
from .parser import parse_markup

logger = logging.getLogger(__name__)

BLANK_DOCUMENT = "<!DOCTYPE html><html><body></body></html>"


class HeadlessEnvironment:
    """One-shot provider of a blank markup document."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._document: Optional[MarkupDocument] = None

    @property
    def is_provisioned(self) -> bool:
        with self._lock:
            return self._document is not None

    def ensure(self) -> MarkupDocument:
        """Provision the document if needed and return it."""
        with self._lock:
            if self._document is None:
                self._document = parse_markup(BLANK_DOCUMENT)
                logger.info("Provisioned headless markup document")
            return self._document


_environment = HeadlessEnvironment()


def ensure_environment() -> MarkupDocument:
    """Return the process-wide document, provisioning it on first call."""
    return _environment.ensure()


def is_provisioned() -> bool:
    return _environment.is_provisioned

