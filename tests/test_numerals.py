"""Tests for numerals module."""
import pytest

from numerals import (
    NumeralError,
    article_token,
    format_citation,
    kansuji_to_arabic,
    kansuji_to_int,
    link_token,
    normalize_variants,
    zen_to_han,
    zen_to_han_digits,
)


class TestKansujiToInt:
    @pytest.mark.parametrize(
        ("numeral", "expected"),
        [
            ("一", 1),
            ("十", 10),
            ("二十", 20),
            ("十二", 12),
            ("百二十三", 123),
            ("三千二百", 3200),
            ("千", 1000),
            ("一万五百", 10500),
            ("二十万", 200000),
            ("一億二千万", 120000000),
            ("十兆", 10 ** 13),
            ("九千九百九十九兆九千九百九十九億", 9999_9999_0000_0000),
            ("二〇二四", 2024),
            ("〇", 0),
        ],
    )
    def test_positional_values(self, numeral: str, expected: int) -> None:
        assert kansuji_to_int(numeral) == expected

    def test_variants_are_normalized(self) -> None:
        assert kansuji_to_int("壱萬") == 10000
        assert kansuji_to_int("廿") == 20
        assert kansuji_to_int("參百") == 300

    def test_full_width_digits(self) -> None:
        assert kansuji_to_int("１２") == 12

    def test_mixed_arabic_and_units(self) -> None:
        assert kansuji_to_int("3万") == 30000

    def test_rejects_non_numerals(self) -> None:
        with pytest.raises(NumeralError):
            kansuji_to_int("第五条")
        with pytest.raises(NumeralError):
            kansuji_to_int("")


class TestKansujiToArabic:
    def test_rewrites_embedded_numerals(self) -> None:
        assert kansuji_to_arabic("第十二条の三") == "第12条の3"

    def test_longer_numeral_not_broken_by_shorter(self) -> None:
        # "二" is also a substring of "十二"
        assert kansuji_to_arabic("十二項及び二項") == "12項及び2項"
        assert kansuji_to_arabic("二項及び十二項") == "2項及び12項"

    def test_text_without_numerals_unchanged(self) -> None:
        assert kansuji_to_arabic("特許権者") == "特許権者"

    def test_pure_functions_do_not_share_state(self) -> None:
        first = kansuji_to_arabic("三条")
        second = kansuji_to_arabic("三条")
        assert first == second == "3条"


class TestWidth:
    def test_zen_to_han_digits(self) -> None:
        assert zen_to_han_digits("１２．５－３") == "12.5-3"

    def test_zen_to_han_letters(self) -> None:
        assert zen_to_han("Ａｂ２") == "Ab2"

    def test_normalize_variants(self) -> None:
        assert normalize_variants("弐拾") == "二拾"


class TestArticleTokens:
    @pytest.mark.parametrize(
        ("title", "token"),
        [
            ("第五条", "5"),
            ("第十二条の三", "12-3"),
            ("第百二十一条の二の四", "121-2-4"),
            ("第１２条", "12"),
        ],
    )
    def test_article_token(self, title: str, token: str) -> None:
        assert article_token(title) == token

    def test_link_token(self) -> None:
        assert link_token("第十二条の三") == "12-3"
        assert link_token("三十条") == "30"


class TestFormatCitation:
    def test_plain_article(self) -> None:
        assert format_citation("12", "条") == "12条"

    def test_sub_numbered_article(self) -> None:
        assert format_citation("12-3", "条") == "12条の3 "

    def test_paragraph(self) -> None:
        assert format_citation("2", "項") == "2項"
