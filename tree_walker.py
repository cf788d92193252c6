"""
Recursive text-node visitor / rewriter over a BeautifulSoup tree.

Every annotation pass is a full walk over the document that hands each text
leaf to a rewrite callback.  A callback returns either ``None`` (leave the
leaf untouched) or a list of fragments (strings and freshly built tags) that
replace the leaf in place.  Children are snapshotted before descent, so the
fragments inserted by a pass are never handed back to the same pass.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PageElement, PreformattedString

Fragment = str | Tag
Rewrite = Callable[[NavigableString], "list[Fragment] | None"]
SkipPredicate = Callable[[Tag], bool]

A = TypeVar("A")
FoldRewrite = Callable[[NavigableString, A], "tuple[list[Fragment] | None, A]"]


# ── helpers ───────────────────────────────────────────────────────────────


def is_text_leaf(node: PageElement) -> bool:
    """True for plain text; comments, CDATA and doctypes are not statute text."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def text_of(node: PageElement | None) -> str:
    """Return the text content of *node* (``""`` for ``None``)."""
    if node is None:
        return ""
    if isinstance(node, Tag):
        return node.get_text()
    return str(node)


def inner_html(el: Tag) -> str:
    """Return the inner HTML of an element as a string."""
    return "".join(str(c) for c in el.children)


def has_class(node: PageElement, name: str) -> bool:
    if not isinstance(node, Tag):
        return False
    classes = node.get("class") or []
    if isinstance(classes, str):
        classes = classes.split()
    return name in classes


def new_span(
    soup: BeautifulSoup,
    children: Iterable[Fragment],
    classes: list[str] | None = None,
    attrs: dict[str, Any] | None = None,
) -> Tag:
    """Build ``<span class=… attrs…>children</span>``."""
    all_attrs: dict[str, Any] = {}
    if classes:
        all_attrs["class"] = list(classes)
    if attrs:
        all_attrs.update(attrs)
    span = soup.new_tag("span", attrs=all_attrs)
    for child in children:
        if isinstance(child, str) and not isinstance(child, NavigableString):
            if not child:
                continue
            child = NavigableString(child)
        span.append(child)
    return span


def replace_text_node(
    node: NavigableString, fragments: list[Fragment]
) -> list[PageElement]:
    """Replace *node* by *fragments* and return the inserted nodes.

    Empty strings are dropped; everything else keeps its order, so the
    concatenated text of the result is the text the caller produced.
    """
    inserted: list[PageElement] = []
    for frag in fragments:
        if isinstance(frag, Tag):
            inserted.append(frag)
        elif frag:
            inserted.append(NavigableString(frag))
    node.replace_with(*inserted)
    return inserted


# ── walkers ───────────────────────────────────────────────────────────────


def walk_text_nodes(
    root: Tag,
    rewrite: Rewrite,
    skip: SkipPredicate | None = None,
) -> int:
    """Visit every text leaf below *root* in document order.

    Returns the number of leaves that were replaced.
    """

    def _fold(node: NavigableString, acc: int) -> tuple[list[Fragment] | None, int]:
        fragments = rewrite(node)
        return fragments, acc + (1 if fragments is not None else 0)

    return fold_text_nodes(root, _fold, 0, skip)


def fold_text_nodes(
    root: Tag,
    rewrite: FoldRewrite[A],
    acc: A,
    skip: SkipPredicate | None = None,
) -> A:
    """Like ``walk_text_nodes`` but thread an accumulator through the walk.

    ``rewrite(leaf, acc)`` returns ``(fragments_or_None, new_acc)``; the
    final accumulator is returned.  Subtrees for which ``skip`` is true are
    not entered.
    """
    for child in list(root.children):
        if is_text_leaf(child):
            fragments, acc = rewrite(child, acc)
            if fragments is not None:
                replace_text_node(child, fragments)
        elif isinstance(child, Tag):
            if skip is not None and skip(child):
                continue
            acc = fold_text_nodes(child, rewrite, acc, skip)
    return acc


def regex_wrap(
    text: str,
    pattern,
    build: Callable[[str], Tag],
) -> list[Fragment] | None:
    """Split *text* on *pattern* and wrap every match with ``build``.

    Returns ``None`` when nothing matched so the caller leaves the leaf alone.
    """
    fragments: list[Fragment] = []
    pos = 0
    for m in pattern.finditer(text):
        if m.start() == m.end():
            continue
        fragments.append(text[pos:m.start()])
        fragments.append(build(m.group(0)))
        pos = m.end()
    if pos == 0:
        return None
    fragments.append(text[pos:])
    return fragments
