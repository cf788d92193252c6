"""
Kanji-numeral ⇄ Arabic conversion and width normalisation.

All helpers are pure functions of their input.

Examples
--------
>>> kansuji_to_int("百二十三")
123
>>> kansuji_to_arabic("第十二条の三")
'第12条の3'
>>> article_token("第十二条の三")
'12-3'
"""

from __future__ import annotations

import re

from config import (
    KANSUJI_DIGITS,
    KANSUJI_LARGE_UNITS,
    KANSUJI_SMALL_UNITS,
    KANSUJI_VARIANTS,
    RE_NUMERAL_RUN,
    SUB_SEP,
    ZEN_NUMERIC_PUNCT,
)


class NumeralError(ValueError):
    """Raised when a string expected to be a numeral cannot be evaluated."""


_RE_SMALL_GROUPS = re.compile("[" + "".join(KANSUJI_SMALL_UNITS) + "]|[^"
                              + "".join(KANSUJI_SMALL_UNITS) + "]+")
_RE_LARGE_GROUPS = re.compile("[" + "".join(KANSUJI_LARGE_UNITS) + "]|[^"
                              + "".join(KANSUJI_LARGE_UNITS) + "]+")

_ZEN_DIGITS = str.maketrans("０１２３４５６７８９", "0123456789")
_KANSUJI_TO_DIGIT = str.maketrans(KANSUJI_DIGITS, "0123456789")


# ── width normalisation ───────────────────────────────────────────────────


def zen_to_han_digits(text: str) -> str:
    """Full-width digits and numeric punctuation → half width."""
    text = text.translate(_ZEN_DIGITS)
    for zen, han in ZEN_NUMERIC_PUNCT.items():
        text = text.replace(zen, han)
    return text


def zen_to_han(text: str) -> str:
    """Full-width ASCII letters and digits → half width (``"Ａ２"`` → ``"A2"``)."""
    return re.sub(
        "[Ａ-Ｚａ-ｚ０-９]",
        lambda m: chr(ord(m.group(0)) - 0xFEE0),
        text,
    )


def normalize_variants(text: str) -> str:
    """Replace historical numeral characters (壱, 參, 廿, 萬 …)."""
    for variant, canonical in KANSUJI_VARIANTS.items():
        text = text.replace(variant, canonical)
    return text


# ── evaluation ────────────────────────────────────────────────────────────


def _eval_units(num: str, pattern: re.Pattern[str], units: dict[str, int]) -> int:
    """Positional evaluation of *num* against one family of unit characters.

    Scanning in reverse, a unit character sets the multiplier for the digit
    group that precedes it; a unit with no digit in front counts as 1×unit.
    Non-unit groups that are not plain digits are evaluated recursively with
    the small units (十百千).
    """
    unit = 1
    result = 0
    for token in reversed(pattern.findall(num)):
        if token in units:
            if unit > 1:
                result += unit
            unit = units[token]
        else:
            if token.isdigit():
                value = int(token)
            else:
                value = _eval_units(token, _RE_SMALL_GROUPS, KANSUJI_SMALL_UNITS)
            result += value * unit
            unit = 1
    if unit > 1:
        result += unit
    return result


def _numeral_value(numeral: str) -> int:
    digits = numeral.translate(_KANSUJI_TO_DIGIT)
    return _eval_units(digits, _RE_LARGE_GROUPS, KANSUJI_LARGE_UNITS)


def kansuji_to_int(numeral: str) -> int:
    """Convert a single Kanji (or mixed Kanji/Arabic) numeral to ``int``.

    Raises ``NumeralError`` when *numeral* contains anything else.
    """
    text = normalize_variants(zen_to_han_digits(numeral.strip()))
    if not text or RE_NUMERAL_RUN.fullmatch(text) is None:
        raise NumeralError(f"not a numeral: {numeral!r}")
    return _numeral_value(text)


def kansuji_to_arabic(text: str) -> str:
    """Rewrite every numeral run embedded in *text* as Arabic digits.

    Distinct runs are substituted longest first, so ``"十二"`` is rewritten
    before ``"二"`` and a shorter run never breaks a longer one apart.
    """
    text = normalize_variants(zen_to_han_digits(text))
    runs = sorted(set(RE_NUMERAL_RUN.findall(text)), key=len, reverse=True)
    for run in runs:
        text = text.replace(run, str(_numeral_value(run)))
    return text


# ── article tokens ────────────────────────────────────────────────────────


def article_token(title: str) -> str:
    """``"第十二条の三"`` → ``"12-3"``."""
    token = kansuji_to_arabic(title)
    token = re.sub("[第条]", "", token)
    return token.replace("の", SUB_SEP).strip()


def link_token(article_text: str) -> str:
    """Anchor token for a bare article mention: every digit run joined by ``-``."""
    return SUB_SEP.join(re.findall(r"[0-9]+", kansuji_to_arabic(article_text)))


def format_citation(token: str, unit: str) -> str:
    """Human-readable label used in tooltips.

    >>> format_citation("12", "条")
    '12条'
    >>> format_citation("12-3", "条")
    '12条の3 '
    """
    label = re.sub(r"^([0-9]+)$", rf"\1{unit}", token)
    label = label.replace(SUB_SEP, unit + SUB_SEP, 1)
    label = label.replace(SUB_SEP, "の")
    return re.sub(r"(の[0-9]+)$", r"\1 ", label)
