"""
Data models for the statute annotator.

Contains the ArticleRecord / ArticleIndex pair built by the article indexer,
the transient BracketSpan parse artifact and the DefinitionRecord consumed by
the definition injector.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from bs4 import Tag

from config import SENTINEL_TOKEN

logger = logging.getLogger(__name__)


# ── BracketSpan ───────────────────────────────────────────────────────────


@dataclass
class BracketSpan:
    """A balanced bracket pair found by ``brackets.parse_brackets``.

    ``content`` is itself a parsed segment list, so nesting is explicit.
    ``depth`` is only meaningful for full-width parentheses.
    """

    kind_index: int
    depth: int
    content: list[str | BracketSpan] = field(default_factory=list)


# ── Articles ──────────────────────────────────────────────────────────────


@dataclass
class ArticleRecord:
    """One Article boundary and its canonical token (``"12-3"``)."""

    token: str
    node: Tag


class ArticleIndex:
    """Document-ordered index of Article boundaries.

    Rules
    -----
    * Records are appended once, in document order, and never mutated.
    * Positions are looked up by node identity, so the sentinel token and
      addenda that restart numbering never confuse previous/next lookups.
    * Tokens may repeat when addenda restart numbering; they are kept as-is.
    """

    def __init__(self) -> None:
        self._records: list[ArticleRecord] = []
        self._positions: dict[int, int] = {}
        self._seen: set[str] = set()

    # ── building ──

    def append(self, token: str, node: Tag) -> ArticleRecord:
        record = ArticleRecord(token=token, node=node)
        self._positions[id(node)] = len(self._records)
        self._records.append(record)
        if token == SENTINEL_TOKEN:
            return record
        if token in self._seen:
            logger.debug("Duplicate article token %s (addendum numbering?)", token)
        self._seen.add(token)
        return record

    # ── queries ──

    def __len__(self) -> int:
        return len(self._records)

    def tokens(self) -> list[str]:
        return [r.token for r in self._records]

    def position_of(self, node: Tag) -> int | None:
        return self._positions.get(id(node))

    def offset(self, node: Tag, delta: int) -> str:
        """Return the token ``delta`` records away from *node*.

        Falls back to the sentinel when *node* is not indexed or the
        neighbour would fall outside the document.
        """
        pos = self.position_of(node)
        if pos is None:
            return SENTINEL_TOKEN
        target = pos + delta
        if not 0 <= target < len(self._records):
            return SENTINEL_TOKEN
        return self._records[target].token

    def previous(self, node: Tag) -> str:
        return self.offset(node, -1)

    def next(self, node: Tag) -> str:
        return self.offset(node, 1)


# ── Definitions ───────────────────────────────────────────────────────────


@dataclass
class DefinitionRecord:
    """A defined term and the context it was defined in.

    ``span`` is the element whose text carries the definition (the
    parenthetical for ``（…同じ。）`` definitions, the element enclosing the
    corner brackets for ``「…」と`` definitions).  ``scope_tokens`` is empty
    when the term applies to the whole statute.
    """

    span: Tag
    word: str
    article: str = SENTINEL_TOKEN
    paragraph: str | None = None
    item: str | None = None
    sentence: str = ""
    scope_tokens: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-ready dictionary (the span itself is omitted)."""
        d: dict[str, object] = {"word": self.word, "article": self.article}
        if self.paragraph is not None:
            d["paragraph"] = self.paragraph
        if self.item is not None:
            d["item"] = self.item
        d["sentence"] = self.sentence
        if self.scope_tokens:
            d["scope"] = list(self.scope_tokens)
        return d
