"""Tests for styling module."""
from bs4 import BeautifulSoup

from styling import ConjunctionStyler, RefNumStyler


def _classed(soup: BeautifulSoup, css_class: str) -> list[str]:
    return [s.get_text() for s in soup.find_all("span", class_=css_class)]


class TestRefNumStyler:
    def test_paragraph_and_item_numbers(self) -> None:
        soup = BeautifulSoup("<p>第二項各号に掲げる者及び同項第三号の者</p>", "lxml")
        RefNumStyler(soup).apply(soup.p)
        assert _classed(soup, "refNum") == ["第二項", "各号", "同項", "第三号"]
        assert soup.p.get_text() == "第二項各号に掲げる者及び同項第三号の者"

    def test_relative_articles(self) -> None:
        soup = BeautifulSoup("<p>前条又は次条</p>", "lxml")
        RefNumStyler(soup).apply(soup.p)
        assert _classed(soup, "refNum") == ["前条", "次条"]

    def test_untouched_without_match(self) -> None:
        soup = BeautifulSoup("<p>特許権者</p>", "lxml")
        assert RefNumStyler(soup).apply(soup.p) == 0


class TestConjunctionStyler:
    def test_conjunctions(self) -> None:
        soup = BeautifulSoup("<p>甲及び乙又は丙並びに丁若しくは戊</p>", "lxml")
        ConjunctionStyler(soup).apply(soup.p)
        assert _classed(soup, "parallel") == ["及び", "又は", "並びに", "若しくは"]
        assert soup.p.get_text() == "甲及び乙又は丙並びに丁若しくは戊"
