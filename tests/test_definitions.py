"""Tests for definitions module."""
from bs4 import BeautifulSoup, NavigableString

from annotator import StatuteAnnotator
from article_index import build_article_index
from brackets import BracketAnnotator
from definitions import DefinitionExtractor, word_before
from references import CrossReferenceResolver
from statute_markup import article_html, law_html


def _extract(parse, html: str):
    soup = parse(html)
    BracketAnnotator(soup).apply(soup.body)
    index = build_article_index(soup.body)
    CrossReferenceResolver(soup, index).apply(soup.body)
    return soup, DefinitionExtractor().extract(soup.body)


class TestCornerBracketDefinitions:
    def test_term_and_context(self, parse, make_law, make_article) -> None:
        sentence = "この法律で「発明」とは、自然法則を利用した技術的思想の創作をいう。"
        _, records = _extract(parse, make_law(make_article("第二条", sentence)))

        assert [r.word for r in records] == ["発明"]
        record = records[0]
        assert record.article == "2"
        assert record.paragraph is None
        assert record.item is None
        assert record.sentence == sentence
        assert record.scope_tokens == []

    def test_substitution_clauses_are_not_definitions(self, parse, make_law, make_article) -> None:
        _, records = _extract(parse, make_law(
            make_article("第三条", "前条中「甲」とあるのは、「乙」と読み替えるものとする。"),
        ))
        assert records == []

    def test_item_label(self, parse, make_law) -> None:
        article = (
            '<section class="active Article">'
            '<div class="_div_ArticleTitle"><span class="font-bold">第二条</span>　定義</div>'
            '<div class="_div_ItemSentence pl-8"><span class="font-bold">三</span>'
            "　「物」とは、有体物をいう。</div>"
            "</section>"
        )
        _, records = _extract(parse, make_law(article))
        assert [r.word for r in records] == ["物"]
        assert records[0].item == "3"
        assert records[0].paragraph is None

    def test_supplementary_provisions_are_ignored(
        self, parse, make_law, make_article, make_suppl
    ) -> None:
        _, records = _extract(parse, make_law(
            make_article("第一条", "目的"),
            suppl=make_suppl(make_article("第一条", "この附則で「旧法」とは、改正前の法律をいう。")),
        ))
        assert records == []

    def test_commentary_is_ignored(self, parse, make_law, make_article) -> None:
        commentary = (
            '<details><summary>逐条解説</summary>'
            '<div class="chikujo_detail">本条で「要件」という。</div></details>'
        )
        _, records = _extract(parse, make_law(make_article("第一条", "目的" + commentary)))
        assert records == []


class TestSameAsDefinitions:
    def test_word_before_parenthesis(self, parse, make_law, make_article) -> None:
        _, records = _extract(parse, make_law(make_article(
            "第五条",
            "甲",
            "特許権者（以下同じ。）は、業として特許発明の実施をする権利を専有する。",
        )))
        assert [r.word for r in records] == ["特許権者"]
        record = records[0]
        assert record.span["class"] == ["bracket", "bracket2-0"]
        assert record.article == "5"
        assert record.paragraph == "2"

    def test_nested_parenthesis(self, parse, make_law, make_article) -> None:
        _, records = _extract(parse, make_law(make_article("第五条", "甲（乙（以下同じ。））は")))
        assert [r.word for r in records] == ["乙"]

    def test_corner_inside_parenthesis_wins(self, parse, make_law, make_article) -> None:
        _, records = _extract(parse, make_law(make_article(
            "第五条", "特許権者（以下「権利者」という。以下同じ。）は"
        )))
        assert [r.word for r in records] == ["権利者"]
        assert "bracket2-0" in records[0].span["class"]

    def test_corner_definition_takes_precedence(self, parse, make_law, make_article) -> None:
        _, records = _extract(parse, make_law(
            make_article("第一条", "会社（以下同じ。）は、"),
            make_article("第二条", "この法律で「会社」とは、株式会社をいう。"),
        ))
        assert [(r.word, r.article) for r in records] == [("会社", "2")]


class TestScope:
    def test_this_article(self, parse, make_law, make_article) -> None:
        _, records = _extract(parse, make_law(make_article(
            "第十条", "甲", "この条において「出願人」とは、特許出願をした者をいう。"
        )))
        assert records[0].scope_tokens == ["10"]
        assert records[0].paragraph == "2"

    def test_cited_range(self, parse, make_law, make_article) -> None:
        _, records = _extract(parse, make_law(make_article(
            "第九条", "第十条から第十二条までにおいて「申請者」とは、特許の申請をする者をいう。"
        )))
        assert records[0].scope_tokens == ["10,12"]

    def test_fallback_to_own_article(self, parse, make_law, make_article) -> None:
        _, records = _extract(parse, make_law(make_article(
            "第三条", "甲", "前項において「届出」とは、書面による届出をいう。"
        )))
        assert records[0].scope_tokens == ["3"]


class TestBlockLabels:
    def test_opening_bracket_is_not_a_paragraph_label(self) -> None:
        result = StatuteAnnotator().annotate(law_html(
            article_html("第二条", "「発明」とは、自然法則を利用した技術的思想の創作をいう。"),
        ))
        record = result.definitions[0]
        assert record.word == "発明"
        assert record.paragraph is None

        soup = BeautifulSoup(result.markup, "lxml")
        tooltip = soup.find("span", class_="defined")["data-tooltip"]
        assert tooltip.startswith("<b>2条</b><br>")

    def test_opening_ref_num_is_not_a_paragraph_label(self) -> None:
        result = StatuteAnnotator().annotate(law_html(
            article_html(
                "第五条",
                "次項に規定する「実施」とは、物の生産をする行為をいう。",
                "実施の態様は政令で定める。",
            ),
        ))
        assert [r.word for r in result.definitions] == ["実施"]
        assert result.definitions[0].paragraph is None

    def test_bold_label_is_read(self, parse, make_law, make_article) -> None:
        _, records = _extract(parse, make_law(make_article(
            "第二条", "甲", "「物」とは、有体物をいう。"
        )))
        assert records[0].paragraph == "2"


class TestWordBefore:
    def test_stops_at_hiragana(self) -> None:
        assert word_before(NavigableString("この法律で特許権者")) == "特許権者"

    def test_katakana_and_middle_dot(self) -> None:
        assert word_before(NavigableString("、プログラム・データ")) == "プログラム・データ"

    def test_no_word(self) -> None:
        assert word_before(NavigableString("、")) is None
        assert word_before(None) is None


class TestDefinitionRecord:
    def test_to_dict(self, parse, make_law, make_article) -> None:
        _, records = _extract(parse, make_law(make_article(
            "第十条", "甲", "この条において「出願人」とは、特許出願をした者をいう。"
        )))
        d = records[0].to_dict()
        assert d["word"] == "出願人"
        assert d["article"] == "10"
        assert d["paragraph"] == "2"
        assert d["scope"] == ["10"]
        assert "item" not in d
