"""
Tooltip injection for defined terms.

Definitions are first ordered so that a term always comes before any
shorter term it contains (``株式会社`` before ``会社``).  The tree is then
walked; at every Article section the definitions are narrowed to those whose
scope is empty or overlaps the section's token, and each text leaf is
matched against the remaining definitions in order.  The first definition
found wraps **all** of its occurrences in ``span.defined``; the leftover text
between them is matched against the definitions after it.  Nothing inside an
existing ``span.defined`` (or tooltip body) is ever entered, so running the
injector again over its own output changes nothing.
"""

from __future__ import annotations

import logging
from collections import deque
from html import escape

from bs4 import BeautifulSoup, NavigableString, Tag

from config import ATTR_ARTICLE_NUM, ATTR_TOOLTIP, Marker
from models import DefinitionRecord
from numerals import format_citation
from ranges import has_intersection
from tree_walker import Fragment, has_class, is_text_leaf, replace_text_node

logger = logging.getLogger(__name__)


def order_definitions(records: list[DefinitionRecord]) -> list[DefinitionRecord]:
    """Move every definition contained in a pending longer one to the back.

    Words are unique, so containment is a strict partial order and each trip
    round the queue settles at least one definition.
    """
    pending = deque(records)
    ordered: list[DefinitionRecord] = []
    while pending:
        record = pending.popleft()
        if any(record.word in other.word for other in pending):
            pending.append(record)
        else:
            ordered.append(record)
    return ordered


def citation_label(record: DefinitionRecord) -> str:
    """``12条の3 2項`` style label for the defining provision."""
    label = format_citation(record.article, "条")
    if record.paragraph:
        label += format_citation(record.paragraph, "項")
    elif record.item:
        label += "1項"
    if record.item:
        label += format_citation(record.item, "号")
    return label


def tooltip_markup(record: DefinitionRecord) -> str:
    """Tooltip body: bold citation, then the defining sentence with the word marked."""
    word = escape(record.word)
    sentence = escape(record.sentence).replace(
        word, f"<span class='{Marker.TOOLTIP_WORD.value}'>{word}</span>"
    )
    return f"<b>{escape(citation_label(record))}</b><br>{sentence}"


def in_scope(record: DefinitionRecord, token: str) -> bool:
    if not record.scope_tokens:
        return True
    return any(has_intersection(token, scope) for scope in record.scope_tokens)


class DefinitionInjector:
    """Wrap occurrences of defined terms in tooltip spans."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self._soup = soup
        self._tooltips: dict[str, str] = {}
        self._wrapped = 0

    # ── public entry point ──

    def apply(self, root: Tag, records: list[DefinitionRecord]) -> int:
        """Inject tooltips below *root*; return the number of terms wrapped."""
        ordered = order_definitions(records)
        self._tooltips = {r.word: tooltip_markup(r) for r in ordered}
        self._wrapped = 0
        self._inject(root, ordered)
        logger.info("Wrapped %d defined-term occurrence(s)", self._wrapped)
        return self._wrapped

    # ── walk ──

    @staticmethod
    def _is_closed(tag: Tag) -> bool:
        return has_class(tag, Marker.DEFINED.value) or has_class(tag, Marker.TOOLTIP_WORD.value)

    def _inject(self, node: Tag, records: list[DefinitionRecord]) -> None:
        if self._is_closed(node):
            return
        for child in list(node.children):
            if is_text_leaf(child):
                self._inject_text(child, records)
            elif isinstance(child, Tag):
                if self._is_closed(child):
                    continue
                token = child.get(ATTR_ARTICLE_NUM)
                if child.name == "section" and token:
                    self._inject(child, [r for r in records if in_scope(r, token)])
                else:
                    self._inject(child, records)

    def _inject_text(self, node: NavigableString, records: list[DefinitionRecord]) -> None:
        text = str(node)
        for i, record in enumerate(records):
            if record.word not in text:
                continue
            pieces = text.split(record.word)
            fragments: list[Fragment] = [pieces[0]]
            for piece in pieces[1:]:
                fragments.append(self._defined_span(record))
                fragments.append(piece)
            self._wrapped += len(pieces) - 1

            remaining = records[i + 1:]
            for inserted in replace_text_node(node, fragments):
                if is_text_leaf(inserted):
                    self._inject_text(inserted, remaining)
            return

    def _defined_span(self, record: DefinitionRecord) -> Tag:
        span = self._soup.new_tag(
            "span",
            attrs={
                "class": [Marker.DEFINED.value],
                ATTR_TOOLTIP: self._tooltips[record.word],
            },
        )
        span.string = record.word
        return span
