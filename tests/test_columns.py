"""Tests for column selectors."""
from __future__ import annotations

import pandas as pd
import pytest

from tidy_tfidf import ColumnNotFound, ColumnRef, col
from tidy_tfidf.columns import as_column_ref


@pytest.fixture
def frame() -> pd.DataFrame:
    return pd.DataFrame({"word": ["a", "b"], "book": ["X", "Y"], "n": [1, 2]})


class TestAsColumnRef:
    def test_column_ref_passes_through(self) -> None:
        ref = col("word")
        assert as_column_ref(ref) is ref

    def test_label(self) -> None:
        assert as_column_ref("word") == ColumnRef("word")

    def test_named_series(self, frame: pd.DataFrame) -> None:
        assert as_column_ref(frame.book) == ColumnRef("book")

    def test_unnamed_series_rejected(self) -> None:
        with pytest.raises(TypeError):
            as_column_ref(pd.Series([1, 2]))

    def test_unhashable_rejected(self) -> None:
        with pytest.raises(TypeError):
            as_column_ref(["word"])

    def test_tuple_label(self) -> None:
        assert as_column_ref(("counts", "n")) == ColumnRef(("counts", "n"))


class TestResolve:
    def test_returns_column(self, frame: pd.DataFrame) -> None:
        assert col("n").resolve(frame).tolist() == [1, 2]

    def test_missing_column(self, frame: pd.DataFrame) -> None:
        with pytest.raises(ColumnNotFound) as excinfo:
            col("chapter").resolve(frame)
        assert excinfo.value.column == "chapter"

    def test_duplicated_label(self) -> None:
        frame = pd.DataFrame([[1, 2]], columns=["n", "n"])
        with pytest.raises(ValueError):
            col("n").resolve(frame)

    def test_refs_are_hashable_and_frozen(self) -> None:
        ref = col("word")
        assert {ref: 1}[ColumnRef("word")] == 1
        with pytest.raises(AttributeError):
            ref.name = "other"
