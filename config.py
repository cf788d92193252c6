"""
Configuration for the statute annotator.

Contains the Marker enum (renderer classes the passes rely on), bracket-pair
tables, Kanji-numeral tables, compiled reference patterns and the
commentary constants.
"""

import re
from enum import Enum


class Marker(str, Enum):
    """CSS classes / ids that delimit structure in the rendered statute.

    Values follow the markup produced by the upstream e-Gov renderer.
    """

    # --- Document-level containers ---
    LAW_TITLE = "text-xl"
    MAIN_PROVISION = "MainProvision"
    SUPPL_PROVISION = "SupplProvision"

    # --- Article and internal blocks ---
    ARTICLE = "Article"
    ARTICLE_TITLE = "_div_ArticleTitle"
    PARAGRAPH_SENTENCE = "_div_ParagraphSentence"
    ITEM_SENTENCE = "_div_ItemSentence"
    BLOCK_LABEL = "font-bold"

    # --- Classes assigned by the annotation passes ---
    BRACKET = "bracket"
    REF_NUM = "refNum"
    PARALLEL = "parallel"
    DEFINED = "defined"
    TOOLTIP_WORD = "tooltipWord"
    COMMENTARY = "chikujo_detail"


# ---------------------------------------------------------------------------
# Attribute names (output contract with the viewer)
# ---------------------------------------------------------------------------

ATTR_ARTICLE_NUM = "article_num"
ATTR_TOOLTIP = "data-tooltip"

# Token assigned to articles / references that cannot be resolved
SENTINEL_TOKEN = "-1"

# Separator between the two bounds of a range token ("5,10")
RANGE_SEP = ","

# Separator between sub-numbering segments ("12-3")
SUB_SEP = "-"


# ---------------------------------------------------------------------------
# Bracket pairs; index + 1 is the ``bracket<k>`` class number
# ---------------------------------------------------------------------------

BRACKET_PAIRS: list[tuple[str, str]] = [
    ("(", ")"),
    ("（", "）"),
    ("「", "」"),
    ("【", "】"),
    ("［", "］"),
    ("[", "]"),
    ("〈", "〉"),
    ("〔", "〕"),
]

# Kind numbers used by other passes
BRACKET_PAREN_FULL = 2   # （ ）, depth-qualified
BRACKET_CORNER = 3       # 「 」

# Nesting depth at which bracket2-<depth> stops growing
BRACKET_MAX_DEPTH = 4


# ---------------------------------------------------------------------------
# Kanji numerals
# ---------------------------------------------------------------------------

# Historical / financial variants → canonical numeral characters
KANSUJI_VARIANTS: dict[str, str] = {
    "零": "〇",
    "壱": "一", "壹": "一", "弌": "一",
    "弐": "二", "貳": "二",
    "参": "三", "參": "三",
    "肆": "四",
    "伍": "五",
    "陸": "六",
    "漆": "七", "柒": "七", "質": "七",
    "捌": "八",
    "玖": "九",
    "廿": "二十",
    "卅": "三十", "丗": "三十",
    "卌": "四十",
    "佰": "百", "陌": "百",
    "仟": "千", "阡": "千",
    "萬": "万",
}

KANSUJI_DIGITS = "〇一二三四五六七八九"

KANSUJI_SMALL_UNITS: dict[str, int] = {"十": 10, "百": 100, "千": 1000}

KANSUJI_LARGE_UNITS: dict[str, int] = {
    "万": 10 ** 4,
    "億": 10 ** 8,
    "兆": 10 ** 12,
}

# Full-width punctuation that appears inside numbers
ZEN_NUMERIC_PUNCT: dict[str, str] = {"．": ".", "－": "-", "ー": "-"}

# Any run of numeral characters (Kanji or already-Arabic)
RE_NUMERAL_RUN = re.compile(
    "[" + KANSUJI_DIGITS + "".join(KANSUJI_SMALL_UNITS)
    + "".join(KANSUJI_LARGE_UNITS) + r"\d]+"
)


# ---------------------------------------------------------------------------
# Reference patterns
# ---------------------------------------------------------------------------

_N = "[一二三四五六七八九〇十百千]"
_ARTICLE_HEAD = rf"(?:第{_N}+|[前同次])条(?:の{_N}+)*"
_ARTICLE_HEAD_LOOSE = rf"(?:第?{_N}+|[前同次])条(?:の{_N}+)*"
_SUFFIX = rf"(?:[第一二三四五六七八九〇十百千前同次の]*[一二三四五六七八九〇十百千項号])?"
_RANGE_TAIL = (
    rf"(?:から{_ARTICLE_HEAD}[第一二三四五六七八九〇十百千前同次項号の]*"
    rf"{_SUFFIX}(?:まで)?)?"
)

# Absolute / relative / ranged article reference, with paragraph/item suffix
RE_REFERENCE = re.compile(_ARTICLE_HEAD + _SUFFIX + _RANGE_TAIL)

# Same, but also accepting "三十条" without the leading 第 (commentary text)
RE_REFERENCE_LOOSE = re.compile(_ARTICLE_HEAD_LOOSE + _SUFFIX + _RANGE_TAIL)

# Bare absolute article mention: 第十二条, 第十二条の三
RE_ARTICLE_ABSOLUTE = re.compile(rf"第{_N}+条(?:の{_N}+)*")
RE_ARTICLE_ABSOLUTE_LOOSE = re.compile(rf"第?{_N}+条(?:の{_N}+)*")

# Canonical token of a single article: 12, 12-3
RE_ARTICLE_TOKEN = re.compile(r"[0-9]+(?:-[0-9]+)*")

# Commentary block heading at the start of a line
RE_COMMENTARY_HEADING = re.compile(
    rf"^第{_N}+条(?:の{_N}+)*[\r\n]*", re.MULTILINE
)

RANGE_WORD = "から"


# ---------------------------------------------------------------------------
# Style patterns
# ---------------------------------------------------------------------------

RE_REF_NUM = re.compile(rf"(?:[前次]条|[第前同次各一二三四五六七八九〇十百千]+[項号](?:の{_N}+)*)")

CONJUNCTIONS: list[str] = ["及び", "又は", "並びに", "若しくは"]

RE_CONJUNCTION = re.compile("|".join(CONJUNCTIONS))


# ---------------------------------------------------------------------------
# Definition discovery
# ---------------------------------------------------------------------------

# 「…」と marks a definition unless it is a substitution clause
DEFINITION_MARK = "」と"
DEFINITION_EXCLUDES: tuple[str, ...] = ("」とあるのは", "」と読み替え")

# （…同じ。）
DEFINITION_SAME = "同じ。"

# Characters that may form a defined word before （…同じ。）
RE_WORD_REVERSED = re.compile(
    r"^[ァ-ヶーｱ-ﾝﾞﾟ一-龥0-9０-９a-zA-Zａ-ｚＡ-Ｚ.．・]+"
)

SCOPE_MARK = "において"
SCOPE_THIS_ARTICLE = "この条"
RE_SCOPE_FALLBACK = re.compile(r"[項号ア-ン]において")


# ---------------------------------------------------------------------------
# Commentary (逐条解説)
# ---------------------------------------------------------------------------

COMMENTARY_SUMMARY = "逐条解説"

# Source markers (実用新案・意匠・商標 cross notes) stripped from the text;
# longer markers first so a shorter one never leaves a fragment behind
COMMENTARY_STRIP_MARKERS: tuple[str, ...] = ("実意商", "意商", "実意")
