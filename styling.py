"""
Cosmetic styling of paragraph/item numbers and legal conjunctions.
"""

from __future__ import annotations

import re

from base_pass import TextRewritePass
from config import RE_CONJUNCTION, RE_REF_NUM, Marker
from tree_walker import Fragment, new_span, regex_wrap


class _ClassWrapPass(TextRewritePass):
    """Wrap every match of ``pattern`` in ``<span class="css_class">``."""

    pattern: re.Pattern[str]
    css_class: str

    def rewrite_text(self, text: str) -> list[Fragment] | None:
        return regex_wrap(
            text,
            self.pattern,
            lambda match: new_span(self._soup, [match], classes=[self.css_class]),
        )


class RefNumStyler(_ClassWrapPass):
    """``第二項``, ``同項``, ``各号``, ``前条``, ``次条`` → ``span.refNum``."""

    name = "refNum"
    pattern = RE_REF_NUM
    css_class = Marker.REF_NUM.value


class ConjunctionStyler(_ClassWrapPass):
    """及び / 又は / 並びに / 若しくは → ``span.parallel``."""

    name = "parallel"
    pattern = RE_CONJUNCTION
    css_class = Marker.PARALLEL.value
