"""
Canonical article-number index.

Walks every ``section.Article`` in document order, converts its title
(``第十二条の三``) to a canonical token (``12-3``), stores the token in the
``article_num`` attribute and appends it to an ``ArticleIndex`` used for
previous/next lookups.
"""

from __future__ import annotations

import logging

from bs4 import Tag

from config import (
    ATTR_ARTICLE_NUM,
    RANGE_SEP,
    RE_ARTICLE_ABSOLUTE,
    RE_ARTICLE_TOKEN,
    SENTINEL_TOKEN,
    Marker,
)
from models import ArticleIndex
from numerals import article_token
from tree_walker import text_of

logger = logging.getLogger(__name__)


def _title_span(section: Tag) -> Tag | None:
    title_div = section.find("div", class_=Marker.ARTICLE_TITLE.value)
    if title_div is None:
        return None
    return title_div.find("span")


def _title_token(title: str) -> str | None:
    """Token for an Article title, or None when it carries no article number.

    A title naming several articles (``第五条及び第六条``, ``第五条から第七条まで``)
    becomes the range of its first and last article.
    """
    token = article_token(title)
    if RE_ARTICLE_TOKEN.fullmatch(token):
        return token
    mentions = RE_ARTICLE_ABSOLUTE.findall(title)
    if not mentions:
        return None
    if len(mentions) == 1:
        return article_token(mentions[0])
    token = f"{article_token(mentions[0])}{RANGE_SEP}{article_token(mentions[-1])}"
    logger.debug("Combined article title %r indexed as %s", title, token)
    return token


def build_article_index(root: Tag) -> ArticleIndex:
    """Index every Article boundary below *root*.

    An Article without a title is kept in the index with the sentinel token
    (so its neighbours still line up) but is not given an attribute.
    """
    index = ArticleIndex()
    for section in root.find_all("section", class_=Marker.ARTICLE.value):
        span = _title_span(section)
        title = text_of(span).strip()
        if span is None or not title:
            logger.warning(
                "Article section without ArticleTitle span found: %.100s",
                section.get_text(" ", strip=True),
            )
            index.append(SENTINEL_TOKEN, section)
            continue
        token = _title_token(title)
        if token is None:
            logger.warning("Article title %r has no article number", title)
            index.append(SENTINEL_TOKEN, section)
            continue
        section[ATTR_ARTICLE_NUM] = token
        index.append(token, section)

    logger.debug("Indexed %d article(s)", len(index))
    return index


def enclosing_article(node) -> Tag | None:
    """Nearest ``section.Article`` ancestor of *node*."""
    return node.find_parent("section", class_=Marker.ARTICLE.value)
