"""
Balanced nested-bracket parsing and styling.

Eight bracket kinds are recognised (see ``config.BRACKET_PAIRS``).  Every
balanced pair becomes ``<span class="bracket bracket<k>">`` with the bracket
characters kept inside the span.  Full-width parentheses are styled by
nesting depth instead: ``bracket2-0`` for the outermost, ``bracket2-1`` for
the next and so on, capped at ``bracket2-4``.  Only enclosing full-width
parentheses count towards that depth.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from base_pass import TextRewritePass
from config import (
    BRACKET_MAX_DEPTH,
    BRACKET_PAIRS,
    BRACKET_PAREN_FULL,
    Marker,
)
from models import BracketSpan
from tree_walker import Fragment, new_span

_OPENERS: dict[str, int] = {o: i + 1 for i, (o, _) in enumerate(BRACKET_PAIRS)}
_CLOSERS: dict[str, int] = {c: i + 1 for i, (_, c) in enumerate(BRACKET_PAIRS)}

Segment = str | BracketSpan


# ── parsing ───────────────────────────────────────────────────────────────


def _append_text(segments: list[Segment], text: str) -> None:
    if not text:
        return
    if segments and isinstance(segments[-1], str):
        segments[-1] += text
    else:
        segments.append(text)


def parse_brackets(text: str) -> list[Segment]:
    """Split *text* into plain strings and nested ``BracketSpan``s.

    A closer that does not match the innermost open bracket is kept as
    literal text; brackets still open at the end of *text* are unwound back
    into literal text, so the concatenated output always equals *text*.
    """
    # frame: (kind_index, depth, segments); the root frame has kind 0
    stack: list[tuple[int, int, list[Segment]]] = [(0, 0, [])]
    paren_depth = 0
    buf: list[str] = []

    def flush() -> None:
        _append_text(stack[-1][2], "".join(buf))
        buf.clear()

    for ch in text:
        kind = _OPENERS.get(ch)
        if kind is not None:
            flush()
            depth = min(paren_depth, BRACKET_MAX_DEPTH)
            stack.append((kind, depth, []))
            if kind == BRACKET_PAREN_FULL:
                paren_depth += 1
            continue
        kind = _CLOSERS.get(ch)
        if kind is not None and len(stack) > 1 and stack[-1][0] == kind:
            flush()
            k, depth, content = stack.pop()
            if k == BRACKET_PAREN_FULL:
                paren_depth -= 1
            stack[-1][2].append(BracketSpan(kind_index=k, depth=depth, content=content))
            continue
        buf.append(ch)
    flush()

    # Unclosed brackets: put the opener back and splice the content in place
    while len(stack) > 1:
        k, _, content = stack.pop()
        parent = stack[-1][2]
        _append_text(parent, BRACKET_PAIRS[k - 1][0])
        for seg in content:
            if isinstance(seg, str):
                _append_text(parent, seg)
            else:
                parent.append(seg)

    return stack[0][2]


def bracket_class(span: BracketSpan) -> str:
    if span.kind_index == BRACKET_PAREN_FULL:
        return f"{Marker.BRACKET.value}{span.kind_index}-{span.depth}"
    return f"{Marker.BRACKET.value}{span.kind_index}"


def is_bracket_span(tag: Tag, kind_index: int) -> bool:
    """True if *tag* was produced for a bracket of *kind_index*."""
    if not isinstance(tag, Tag) or tag.name != "span":
        return False
    classes = tag.get("class") or []
    plain = f"{Marker.BRACKET.value}{kind_index}"
    return any(c == plain or c.startswith(plain + "-") for c in classes)


# ── rendering ─────────────────────────────────────────────────────────────


def render_segments(soup: BeautifulSoup, segments: list[Segment]) -> list[Fragment]:
    fragments: list[Fragment] = []
    for seg in segments:
        if isinstance(seg, str):
            if fragments and isinstance(fragments[-1], str):
                fragments[-1] += seg
            else:
                fragments.append(seg)
            continue
        opener, closer = BRACKET_PAIRS[seg.kind_index - 1]
        inner = render_segments(soup, [opener, *seg.content, closer])
        fragments.append(
            new_span(soup, inner, classes=[Marker.BRACKET.value, bracket_class(seg)])
        )
    return fragments


class BracketAnnotator(TextRewritePass):
    """Wrap every balanced bracket pair in a styled span."""

    name = "brackets"

    def rewrite_text(self, text: str) -> list[Fragment] | None:
        segments = parse_brackets(text)
        if all(isinstance(seg, str) for seg in segments):
            return None
        return render_segments(self._soup, segments)
