"""
Column selectors.

A column can be referenced three ways:
  - a ColumnRef, e.g. col("word")
  - a Series taken from the table, e.g. df.word or df["word"]
  - a plain column label, e.g. "word"

All three are turned into a ColumnRef, which is resolved against the table
once, before any computation starts.
"""

from collections.abc import Hashable
from dataclasses import dataclass

import pandas as pd

from .errors import ColumnNotFound


@dataclass(frozen=True)
class ColumnRef:
    name: Hashable

    def resolve(self, frame: pd.DataFrame) -> pd.Series:
        """Return the referenced column of ``frame``."""
        if self.name not in frame.columns:
            raise ColumnNotFound(self.name, frame.columns.tolist())
        column = frame[self.name]
        if isinstance(column, pd.DataFrame):
            # duplicated label: more than one column matches
            raise ValueError(f"Column label {self.name!r} is not unique")
        return column


def col(name) -> ColumnRef:
    return ColumnRef(name)


def as_column_ref(value) -> ColumnRef:
    """
    Convert a column reference of any supported form into a ColumnRef.

    Parameters
    ----------
    value : ColumnRef, pd.Series or hashable label
        A Series is referenced by its ``name``; it must therefore be named.

    Returns
    -------
    ColumnRef
    """
    if isinstance(value, ColumnRef):
        return value
    if isinstance(value, pd.Series):
        if value.name is None:
            raise TypeError("Cannot reference an unnamed Series as a column")
        return ColumnRef(value.name)
    if not isinstance(value, Hashable):
        raise TypeError(f"Unsupported column reference: {value!r}")
    return ColumnRef(value)
