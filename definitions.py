"""
Discovery of defined terms.

Two heuristics run in a fixed order and write into one word → record map in
which the first writer wins:

1. Corner brackets in a sentence that says ``「…」と`` (``「会社」という``),
   except substitution clauses (``「…」とあるのは``, ``「…」と読み替え``).
2. Full-width parentheses saying ``同じ。`` (``特許権者（以下同じ。）``); the
   word is the run of word characters right before the parenthesis.

Because rule 1 runs first, a term defined both ways keeps its corner-bracket
definition.  Addenda and commentary blocks are never searched.
"""

from __future__ import annotations

import copy
import logging

from bs4 import Tag
from bs4.element import PageElement

from article_index import enclosing_article
from brackets import is_bracket_span
from config import (
    ATTR_ARTICLE_NUM,
    BRACKET_CORNER,
    BRACKET_PAREN_FULL,
    DEFINITION_EXCLUDES,
    DEFINITION_MARK,
    DEFINITION_SAME,
    RE_SCOPE_FALLBACK,
    RE_WORD_REVERSED,
    SCOPE_MARK,
    SCOPE_THIS_ARTICLE,
    SENTINEL_TOKEN,
    Marker,
)
from models import DefinitionRecord
from numerals import kansuji_to_arabic, zen_to_han
from ranges import is_resolved
from tree_walker import text_of

logger = logging.getLogger(__name__)


# ── helpers ───────────────────────────────────────────────────────────────


def _is_corner(tag: Tag) -> bool:
    return is_bracket_span(tag, BRACKET_CORNER)


def _is_paren(tag: Tag) -> bool:
    return is_bracket_span(tag, BRACKET_PAREN_FULL)


def _excluded_region(span: Tag) -> bool:
    """Addenda and collapsible commentary are not searched for definitions."""
    if span.find_parent(class_=Marker.SUPPL_PROVISION.value) is not None:
        return True
    return span.find_parent("details") is not None


def _without_nested_parens(span: Tag) -> Tag:
    """Copy of *span* with every nested full-width parenthetical removed."""
    clone = copy.copy(span)
    for nested in clone.find_all(_is_paren):
        nested.extract()
    return clone


def _closest(tag: Tag, name: str, class_: str | None = None) -> Tag | None:
    """Like DOM ``closest``: *tag* itself or its nearest matching ancestor."""
    if tag.name == name and (class_ is None or class_ in (tag.get("class") or [])):
        return tag
    if class_ is None:
        return tag.find_parent(name)
    return tag.find_parent(name, class_=class_)


def _leading_span(block: Tag | None) -> Tag | None:
    """The label ``<span>`` a block starts with (article title, paragraph or item number).

    Only the renderer's bold label counts; a bracket, citation or refNum span
    at the start of the text is not a label.
    """
    if block is None:
        return None
    for child in block.children:
        if isinstance(child, Tag):
            if child.name == "span" and Marker.BLOCK_LABEL.value in (child.get("class") or []):
                return child
            return None
        if str(child).strip():
            return None
    return None


def _leading_label(block: Tag | None) -> str | None:
    span = _leading_span(block)
    if span is None:
        return None
    return span.get_text(strip=True) or None


def word_before(node: PageElement | None) -> str | None:
    """The run of word characters at the very end of *node*'s text."""
    if node is None:
        return None
    m = RE_WORD_REVERSED.match(text_of(node)[::-1])
    if m is None:
        return None
    return m.group(0)[::-1]


# ── extractor ─────────────────────────────────────────────────────────────


class DefinitionExtractor:
    """Collect ``DefinitionRecord``s from an annotated statute.

    Expects the bracket, article-index and cross-reference passes to have
    run: it reads bracket spans, ``article_num`` on Article sections and the
    ``article_num`` spans inside defining sentences.
    """

    def __init__(self) -> None:
        self._records: dict[str, DefinitionRecord] = {}

    # ── public entry point ──

    def extract(self, root: Tag) -> list[DefinitionRecord]:
        self._records = {}
        self._find_corner_definitions(root)
        self._find_same_as_definitions(root)
        for record in self._records.values():
            self._fill_context(record)
        logger.info("Found %d defined term(s)", len(self._records))
        return list(self._records.values())

    # ── discovery ──

    def _add(self, word: str, span: Tag, rule: str) -> None:
        if not word:
            return
        if word in self._records:
            logger.debug("Definition of %r by %s ignored (already defined)", word, rule)
            return
        self._records[word] = DefinitionRecord(span=span, word=word)

    def _find_corner_definitions(self, root: Tag) -> None:
        for span in root.find_all(_is_corner):
            block = span.find_parent("div")
            if block is None:
                continue
            text = block.get_text()
            if any(ex in text for ex in DEFINITION_EXCLUDES):
                continue
            if DEFINITION_MARK not in text:
                continue
            if _excluded_region(span):
                continue
            section = span.find_parent("section")
            if section is None or not section.get(ATTR_ARTICLE_NUM):
                continue
            word = span.get_text()[1:-1]
            self._add(word, span.parent, "corner brackets")

    def _find_same_as_definitions(self, root: Tag) -> None:
        for span in root.find_all(_is_paren):
            if enclosing_article(span) is None or _excluded_region(span):
                continue
            clone = _without_nested_parens(span)
            if DEFINITION_SAME not in clone.get_text():
                continue
            if clone.find(_is_corner) is not None:
                # defined by the corner brackets inside instead
                continue
            word = word_before(span.previous_sibling)
            if word:
                self._add(word, span, "同じ。")

    # ── context ──

    def _fill_context(self, record: DefinitionRecord) -> None:
        span = record.span
        article = enclosing_article(span)
        record.article = (article.get(ATTR_ARTICLE_NUM) if article else None) or SENTINEL_TOKEN

        paragraph = _leading_label(
            _closest(span, "div", Marker.PARAGRAPH_SENTENCE.value)
        )
        if paragraph is not None:
            record.paragraph = zen_to_han(paragraph)
        item = _leading_label(_closest(span, "div", Marker.ITEM_SENTENCE.value))
        if item is not None:
            record.item = kansuji_to_arabic(item)

        block = _closest(span, "div")
        record.sentence = (block if block is not None else span).get_text()
        record.scope_tokens = self._scope_of(record)

    @staticmethod
    def _scope_of(record: DefinitionRecord) -> list[str]:
        """Articles a definition is limited to ("…において"), or ``[]``."""
        text = record.span.get_text()
        if SCOPE_MARK not in text:
            return []

        clone = _without_nested_parens(record.span)
        if clone.name == "div":
            # the article title label cites the article itself
            label = _leading_span(clone)
            if label is not None:
                label.extract()
        tokens = [
            tag[ATTR_ARTICLE_NUM]
            for tag in clone.find_all(attrs={ATTR_ARTICLE_NUM: True})
            if is_resolved(tag[ATTR_ARTICLE_NUM])
        ]
        own = record.article if is_resolved(record.article) else None
        if own is not None and SCOPE_THIS_ARTICLE in text:
            tokens.append(own)
        if not tokens and own is not None and RE_SCOPE_FALLBACK.search(text):
            tokens.append(own)
        return tokens
