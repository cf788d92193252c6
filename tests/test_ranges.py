"""Tests for ranges module."""
import pytest

from ranges import compare_article_num, has_intersection, is_included, is_resolved


class TestCompareArticleNum:
    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            ("5", "5", 0),
            ("5", "12", -1),
            ("12", "5", 1),
            ("12", "12-3", -1),
            ("12-3", "12", 1),
            ("12-3", "13", -1),
            ("12-3", "12-10", -1),
            ("12-2-4", "12-2-1", 1),
        ],
    )
    def test_ordering(self, a: str, b: str, expected: int) -> None:
        assert compare_article_num(a, b) == expected

    def test_requires_leading_number(self) -> None:
        with pytest.raises(ValueError):
            compare_article_num("-1", "5")


class TestIsIncluded:
    def test_bounds_are_inclusive(self) -> None:
        assert is_included(["5", "10"], "5")
        assert is_included(["5", "10"], "10")

    def test_inside_and_outside(self) -> None:
        assert is_included(["5", "10"], "7")
        assert is_included(["5", "10"], "9-2")
        assert not is_included(["5", "10"], "11")
        assert not is_included(["5", "10"], "4")


class TestHasIntersection:
    def test_points(self) -> None:
        assert has_intersection("5", "5")
        assert not has_intersection("5", "6")
        assert not has_intersection("5", "12")

    def test_sub_article_overlaps_parent(self) -> None:
        assert has_intersection("12-3", "12")
        assert has_intersection("12", "12-3")
        assert not has_intersection("12-3", "13")

    def test_point_and_range(self) -> None:
        assert has_intersection("7", "5,10")
        assert has_intersection("5,10", "7")
        assert not has_intersection("11", "5,10")
        assert not has_intersection("5,10", "11")

    def test_ranges(self) -> None:
        assert has_intersection("5,10", "8,12")
        assert has_intersection("5,10", "6,7")
        assert has_intersection("6,7", "5,10")
        assert not has_intersection("5,10", "11,12")


class TestIsResolved:
    def test_tokens(self) -> None:
        assert is_resolved("5")
        assert is_resolved("12-3")
        assert is_resolved("5,10")
        assert not is_resolved("-1")
        assert not is_resolved("-1,10")
