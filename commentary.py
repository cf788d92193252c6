"""
Article-by-article commentary (逐条解説) attachment.

The commentary is a plain-text document whose first line is a header and
whose blocks each start with a line naming an article (``第三十条``).  Every
block is appended to the matching main-provision Article as

    <details><summary>逐条解説</summary><div class="chikujo_detail">…</div></details>

and annotated with the bracket, cross-reference, link and number-style
passes.  References are read loosely (``三十条`` without ``第``) and the
"last cited article" starts afresh for every block.
"""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup, NavigableString, Tag

from brackets import BracketAnnotator
from config import (
    ATTR_ARTICLE_NUM,
    COMMENTARY_STRIP_MARKERS,
    COMMENTARY_SUMMARY,
    RE_COMMENTARY_HEADING,
    Marker,
)
from models import ArticleIndex
from numerals import article_token
from references import ArticleLinker, CrossReferenceResolver
from styling import RefNumStyler

logger = logging.getLogger(__name__)

_RE_HEADER_LINE = re.compile(r"^[^\r\n]*\r?\n")


def split_commentary(text: str) -> list[tuple[str, str]]:
    """Split a commentary document into ``(article_token, body)`` pairs.

    Text before the first article heading is discarded.
    """
    text = _RE_HEADER_LINE.sub("", text, count=1)
    headings = list(RE_COMMENTARY_HEADING.finditer(text))
    blocks: list[tuple[str, str]] = []
    for i, m in enumerate(headings):
        end = headings[i + 1].start() if i + 1 < len(headings) else len(text)
        body = text[m.end():end].rstrip("\r\n")
        for marker in COMMENTARY_STRIP_MARKERS:
            body = body.replace(marker, "")
        blocks.append((article_token(m.group(0).strip()), body))
    return blocks


class CommentaryAttacher:
    """Append commentary blocks under their articles and annotate them."""

    def __init__(self, soup: BeautifulSoup, index: ArticleIndex) -> None:
        self._soup = soup
        self._index = index

    def attach(self, commentary: str, root: Tag) -> int:
        """Attach every block of *commentary* to the Articles under *root*.

        *root* is the main provision; addendum articles that restart
        numbering are never targets.  Returns the number of blocks attached.
        """
        targets: dict[str, Tag] = {}
        for section in root.find_all("section", class_=Marker.ARTICLE.value):
            if section.has_attr(ATTR_ARTICLE_NUM):
                targets.setdefault(section[ATTR_ARTICLE_NUM], section)
        attached = 0
        for token, body in split_commentary(commentary):
            article = targets.get(token)
            if article is None:
                logger.warning("Commentary for unknown article %s dropped", token)
                continue
            detail = self._build_details(article, body)
            self._annotate(detail)
            attached += 1
        logger.info("Attached %d commentary block(s)", attached)
        return attached

    def _build_details(self, article: Tag, body: str) -> Tag:
        details = self._soup.new_tag("details")
        summary = self._soup.new_tag("summary")
        summary.string = COMMENTARY_SUMMARY
        detail = self._soup.new_tag("div", attrs={"class": [Marker.COMMENTARY.value]})
        if body:
            detail.append(NavigableString(body))
        details.append(summary)
        details.append(detail)
        # attached before annotation so 前条 / 次条 resolve against this article
        article.append(details)
        return detail

    def _annotate(self, detail: Tag) -> None:
        BracketAnnotator(self._soup).apply(detail)
        CrossReferenceResolver(self._soup, self._index, loose=True).apply(detail)
        ArticleLinker(self._soup, loose=True).apply(detail)
        RefNumStyler(self._soup).apply(detail)
