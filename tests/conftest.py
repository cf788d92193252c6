"""Shared fixtures."""
from __future__ import annotations

from typing import Callable

import pytest
from bs4 import BeautifulSoup

from statute_markup import article_html, law_html, suppl_html


@pytest.fixture()
def make_article() -> Callable[..., str]:
    return article_html


@pytest.fixture()
def make_law() -> Callable[..., str]:
    return law_html


@pytest.fixture()
def make_suppl() -> Callable[..., str]:
    return suppl_html


@pytest.fixture()
def parse() -> Callable[[str], BeautifulSoup]:
    def _parse(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "lxml")

    return _parse
