"""
Statute annotation pipeline.

Runs every pass, in a fixed order, over one rendered statute:

1. brackets           : ``span.bracket*``
2. article index      : ``article_num`` on ``section.Article``
3. cross references   : ``span[article_num]``
4. links              : ``a[href="#article…"]``
5. paragraph/item nums: ``span.refNum``
6. conjunctions       : ``span.parallel``
7. title anchor names
8. commentary         : ``details > div.chikujo_detail`` (optional)
9. definitions        : discovery, then ``span.defined`` tooltips

Each pass only rewrites text leaves, so markup added by an earlier pass is
never re-read as text by a later one; the order above is significant.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from bs4 import BeautifulSoup, Tag

from article_index import build_article_index
from brackets import BracketAnnotator
from commentary import CommentaryAttacher
from config import Marker
from definitions import DefinitionExtractor
from injector import DefinitionInjector
from models import ArticleIndex, DefinitionRecord
from references import ArticleLinker, CrossReferenceResolver, name_title_anchors
from styling import ConjunctionStyler, RefNumStyler
from tree_walker import inner_html

logger = logging.getLogger(__name__)


@dataclass
class AnnotationResult:
    """Output of one pipeline run."""

    title: str
    markup: str
    definitions: list[DefinitionRecord] = field(default_factory=list)
    index: ArticleIndex = field(default_factory=ArticleIndex)

    def to_dict(self) -> dict[str, object]:
        return {
            "title": self.title,
            "articles": self.index.tokens(),
            "definitions": [d.to_dict() for d in self.definitions],
        }


class StatuteAnnotator:
    """Annotate rendered statute HTML with links, styles and tooltips."""

    # ── public entry point ──

    def annotate(self, html: str, commentary: str | None = None) -> AnnotationResult:
        """Parse *html*, run every pass and return the annotated markup.

        Parameters
        ----------
        html : str
            Rendered statute (markup from the upstream renderer).
        commentary : str, optional
            Article-by-article commentary text to attach.
        """
        soup = BeautifulSoup(html, "lxml")
        root = soup.body if soup.body is not None else soup
        return self.annotate_tree(soup, root, commentary)

    def annotate_tree(
        self,
        soup: BeautifulSoup,
        root: Tag,
        commentary: str | None = None,
    ) -> AnnotationResult:
        """Run every pass over an already-parsed tree, mutating it in place."""
        title = self._extract_title(root)

        BracketAnnotator(soup).apply(root)
        index = build_article_index(root)
        CrossReferenceResolver(soup, index).apply(root)
        ArticleLinker(soup).apply(root)
        RefNumStyler(soup).apply(root)
        ConjunctionStyler(soup).apply(root)
        name_title_anchors(root)

        main = self._main_provision(root)
        if commentary is not None:
            CommentaryAttacher(soup, index).attach(commentary, main)

        definitions = DefinitionExtractor().extract(root)
        DefinitionInjector(soup).apply(main, definitions)

        return AnnotationResult(
            title=title,
            markup=inner_html(root),
            definitions=definitions,
            index=index,
        )

    # ── helpers ──

    @staticmethod
    def _extract_title(root: Tag) -> str:
        title_div = root.find("div", class_=Marker.LAW_TITLE.value)
        if title_div is None:
            logger.warning("Statute title (div.%s) not found", Marker.LAW_TITLE.value)
            return ""
        return title_div.get_text().strip()

    @staticmethod
    def _main_provision(root: Tag) -> Tag:
        main = root.find("section", id=Marker.MAIN_PROVISION.value)
        if main is None:
            logger.warning("section#%s not found; using the whole document",
                           Marker.MAIN_PROVISION.value)
            return root
        return main


def annotate_law(html: str, commentary: str | None = None) -> tuple[str, str]:
    """Convenience wrapper returning ``(title, markup)``."""
    result = StatuteAnnotator().annotate(html, commentary)
    return result.title, result.markup
