"""
Abstract base pass for the statute annotator.

Concrete subclasses (bracket, link and style passes) implement the
per-leaf rewrite while inheriting the common tree walk, the skip rules and
the per-pass logging.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from bs4 import BeautifulSoup, NavigableString, Tag

from tree_walker import Fragment, walk_text_nodes

logger = logging.getLogger(__name__)


class TextRewritePass(ABC):
    """Base class for passes that rewrite text leaves independently."""

    #: Name used in log messages
    name: str = "pass"

    def __init__(self, soup: BeautifulSoup) -> None:
        self._soup = soup

    # ── public entry point ──

    def apply(self, root: Tag) -> int:
        """Rewrite every text leaf below *root*; return the number changed."""
        changed = walk_text_nodes(root, self._rewrite_node, self.skip)
        logger.debug("%s: rewrote %d text node(s)", self.name, changed)
        return changed

    # ── abstract methods ── (to be implemented by subclasses)

    @abstractmethod
    def rewrite_text(self, text: str) -> list[Fragment] | None:
        """Return replacement fragments for *text*, or ``None`` to keep it."""
        ...

    # ── concrete helpers ──

    def skip(self, tag: Tag) -> bool:
        """Subtrees for which this returns true are not entered."""
        return False

    def _rewrite_node(self, node: NavigableString) -> list[Fragment] | None:
        return self.rewrite_text(str(node))
