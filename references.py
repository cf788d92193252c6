"""
Article cross-reference resolution and linking.

Three passes live here:

* ``CrossReferenceResolver`` wraps every absolute (``第五条``), relative
  (``前条`` / ``次条`` / ``同条``) or ranged (``第五条から第十条まで``)
  reference in ``<span article_num="…">``.  ``同条`` means "the article
  cited last", so the last resolved token is threaded through the walk as
  an explicit accumulator.
* ``ArticleLinker`` wraps bare absolute mentions in ``<a href="#article…">``.
  It runs after the resolver and may link text the resolver already wrapped.
* ``name_title_anchors`` copies each article title anchor's ``href`` into
  its ``name`` so the links above have targets.
"""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup, NavigableString, Tag

from article_index import enclosing_article
from base_pass import TextRewritePass
from config import (
    ATTR_ARTICLE_NUM,
    RANGE_SEP,
    RANGE_WORD,
    RE_ARTICLE_ABSOLUTE,
    RE_ARTICLE_ABSOLUTE_LOOSE,
    RE_REFERENCE,
    RE_REFERENCE_LOOSE,
    SENTINEL_TOKEN,
    Marker,
)
from models import ArticleIndex
from numerals import article_token, link_token
from ranges import is_resolved
from tree_walker import Fragment, fold_text_nodes, new_span, regex_wrap

logger = logging.getLogger(__name__)


class ReferenceContractError(ValueError):
    """A reference matched the combined pattern but its article part did not.

    This means the reference pattern and the extraction pattern disagree,
    which is a bug rather than a quirk of the statute text.
    """


# ── resolver ──────────────────────────────────────────────────────────────


class CrossReferenceResolver:
    """Resolve article references into ``article_num`` tokens.

    Parameters
    ----------
    soup : BeautifulSoup
        Document used to build the wrapping spans.
    index : ArticleIndex
        Article order for ``前条`` / ``次条``.
    loose : bool
        Also accept references without the leading ``第`` (commentary text).
    """

    def __init__(self, soup: BeautifulSoup, index: ArticleIndex, loose: bool = False) -> None:
        self._soup = soup
        self._index = index
        self._pattern = RE_REFERENCE_LOOSE if loose else RE_REFERENCE
        self._absolute = RE_ARTICLE_ABSOLUTE_LOOSE if loose else RE_ARTICLE_ABSOLUTE

    # ── public entry point ──

    def apply(self, root: Tag, last_token: str = SENTINEL_TOKEN) -> str:
        """Annotate every reference below *root*.

        Returns the last resolved token, so a caller can continue the same
        reading order over another subtree.
        """
        return fold_text_nodes(root, self._rewrite, last_token)

    def resolve(self, text: str, article: Tag | None, last_token: str) -> str:
        """Resolve one reference (no range) to a canonical token."""
        head = text[:1]
        if head == "前":
            return self._index.previous(article) if article is not None else SENTINEL_TOKEN
        if head == "次":
            return self._index.next(article) if article is not None else SENTINEL_TOKEN
        if head == "同":
            return last_token

        m = self._absolute.search(text)
        if m is None:
            raise ReferenceContractError(f"no article number in reference {text!r}")
        return article_token(m.group(0))

    def resolve_reference(
        self, part: str, article: Tag | None, last_token: str
    ) -> tuple[str, str]:
        """Resolve a matched reference, possibly a range.

        Returns ``(token, new_last_token)``.  A range resolves both ends
        against the same ``last_token`` and yields ``"start,end"``; the end
        becomes the new last token.  Unresolved references leave the last
        token unchanged.
        """
        if RANGE_WORD in part:
            first, second = part.split(RANGE_WORD, 1)
            start = self.resolve(first, article, last_token)
            end = self.resolve(second, article, last_token)
            token = f"{start}{RANGE_SEP}{end}"
            if is_resolved(end):
                last_token = end
            return token, last_token

        token = self.resolve(part, article, last_token)
        if is_resolved(token):
            last_token = token
        return token, last_token

    # ── walk ──

    def _rewrite(
        self, node: NavigableString, last_token: str
    ) -> tuple[list[Fragment] | None, str]:
        text = str(node)
        matches = [m for m in self._pattern.finditer(text) if m.end() > m.start()]
        if not matches:
            return None, last_token

        article = enclosing_article(node)
        fragments: list[Fragment] = []
        pending = ""
        pos = 0
        wrapped = 0
        for m in matches:
            part = m.group(0)
            token, last_token = self.resolve_reference(part, article, last_token)
            pending += text[pos:m.start()]
            pos = m.end()
            if not is_resolved(token):
                # nothing to cite; keep the text as it is
                logger.debug("Unresolved reference %r", part)
                pending += part
                continue
            fragments.append(pending)
            fragments.append(new_span(self._soup, [part], attrs={ATTR_ARTICLE_NUM: token}))
            pending = ""
            wrapped += 1
        if not wrapped:
            return None, last_token
        fragments.append(pending + text[pos:])
        return fragments, last_token


# ── links ─────────────────────────────────────────────────────────────────


class ArticleLinker(TextRewritePass):
    """Hyperlink bare absolute article mentions."""

    name = "links"

    def __init__(self, soup: BeautifulSoup, loose: bool = False) -> None:
        super().__init__(soup)
        self._pattern: re.Pattern[str] = (
            RE_ARTICLE_ABSOLUTE_LOOSE if loose else RE_ARTICLE_ABSOLUTE
        )

    def skip(self, tag: Tag) -> bool:
        # never nest an anchor inside an anchor
        return tag.name == "a"

    def rewrite_text(self, text: str) -> list[Fragment] | None:
        return regex_wrap(text, self._pattern, self._link)

    def _link(self, article_text: str) -> Tag:
        a = self._soup.new_tag("a", href=f"#article{link_token(article_text)}")
        a.string = article_text
        return a


def name_title_anchors(root: Tag) -> int:
    """Give every article title anchor a ``name`` equal to its ``href`` target."""
    named = 0
    for div in root.find_all("div", class_=Marker.ARTICLE_TITLE.value):
        a = div.find("a")
        if a is None:
            logger.warning(
                "ArticleTitle div without anchor found: %.100s",
                div.get_text(" ", strip=True),
            )
            continue
        href = a.get("href")
        if href:
            a["name"] = href[1:]
            named += 1
    return named
