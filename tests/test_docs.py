"""Run the examples in the package docstrings."""
from __future__ import annotations

import doctest

import tidy_tfidf


def test_package_docstring_examples() -> None:
    result = doctest.testmod(tidy_tfidf)
    assert result.attempted > 0
    assert result.failed == 0
