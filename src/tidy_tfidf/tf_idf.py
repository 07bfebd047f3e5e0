"""Bind tf, idf and tf_idf columns to a long-form document-term table."""

import logging

import numpy as np
import pandas as pd
from pandas.api.types import is_bool_dtype, is_complex_dtype, is_numeric_dtype
from pandas.api.typing import DataFrameGroupBy

from .columns import ColumnRef, as_column_ref
from .config import IDF_COLUMN, OUTPUT_COLUMNS, TF_COLUMN, TF_IDF_COLUMN
from .errors import TypeMismatch

logger = logging.getLogger(__name__)


def bind_tf_idf(tbl, term, document, n, *, coerce_counts: bool = False):
    """
    Bind term frequency, inverse document frequency and their product to a
    long-form document-term table.

        docTotal(d) = sum of n over the rows of document d
        TF          = n / docTotal(document)
        DF[t]       = number of rows with term t
        IDF         = log(numDocs / DF[term])
        TF_IDF      = TF * IDF

    Parameters
    ----------
    tbl : pd.DataFrame or DataFrameGroupBy
        One row per document-term pair. Duplicated pairs are not detected:
        every copy reuses the same document total and document frequency.
        Groups of a grouped table are ignored for the computation but kept
        on the result.
    term, document, n : ColumnRef, pd.Series or column label
        Columns holding the terms, the document ids and the counts.
    coerce_counts : bool
        Run ``pd.to_numeric`` on the count column first. Without it a
        non-numeric count column raises TypeMismatch.

    Returns
    -------
    pd.DataFrame or DataFrameGroupBy
        A copy of ``tbl`` with ``tf``, ``idf`` and ``tf_idf`` columns.
        Existing columns with those names are overwritten. A document whose
        counts sum to zero gives NaN or inf, left as is.
    """
    return _bind_tf_idf(
        tbl,
        as_column_ref(term),
        as_column_ref(document),
        as_column_ref(n),
        coerce_counts=coerce_counts,
    )


def bind_tf_idf_string(tbl, term: str, document: str, n: str, *, coerce_counts: bool = False):
    """
    Same as bind_tf_idf(), with the three columns given as names.
    """
    for arg_name, value in (("term", term), ("document", document), ("n", n)):
        if not isinstance(value, str):
            raise TypeError(f"{arg_name} must be a column name string, got {type(value).__name__}")
    return bind_tf_idf(
        tbl, ColumnRef(term), ColumnRef(document), ColumnRef(n), coerce_counts=coerce_counts
    )


# ================== Core ==================
def _bind_tf_idf(tbl, term: ColumnRef, document: ColumnRef, n: ColumnRef, coerce_counts=False):
    if isinstance(tbl, DataFrameGroupBy):
        frame, grouped = tbl.obj, tbl
    elif isinstance(tbl, pd.DataFrame):
        frame, grouped = tbl, None
    else:
        raise TypeError(f"Expected a DataFrame or DataFrameGroupBy, got {type(tbl).__name__}")

    # Resolve and validate everything before computing
    terms = term.resolve(frame)
    documents = document.resolve(frame)
    counts = _counts_as_float(n.resolve(frame), n.name, coerce_counts)

    # Missing ids get code -1
    term_codes, term_uniques = pd.factorize(terms, sort=False)
    doc_codes, doc_uniques = pd.factorize(documents, sort=False)
    num_docs = len(doc_uniques)

    # Document totals (summed in row order) and document frequencies
    has_doc = doc_codes >= 0
    doc_totals = np.bincount(doc_codes[has_doc], weights=counts[has_doc], minlength=num_docs)
    has_term = term_codes >= 0
    doc_freq = np.bincount(term_codes[has_term], minlength=len(term_uniques))

    logger.debug(
        "bind_tf_idf: rows=%d documents=%d terms=%d grouped=%s",
        len(frame), num_docs, len(term_uniques), grouped is not None,
    )

    # Zero totals give NaN/inf on purpose
    with np.errstate(divide="ignore", invalid="ignore"):
        tf = counts / _take(doc_totals, doc_codes)
        idf = _take(np.log(num_docs / doc_freq), term_codes)
        tf_idf = tf * idf

    out = frame.copy()
    out[TF_COLUMN] = tf
    out[IDF_COLUMN] = idf
    out[TF_IDF_COLUMN] = tf_idf

    if grouped is None:
        return out
    return _regroup(out, grouped)


def _counts_as_float(counts: pd.Series, name, coerce: bool) -> np.ndarray:
    if coerce:
        try:
            counts = pd.to_numeric(counts, errors="raise")
        except (TypeError, ValueError) as exc:
            raise TypeMismatch(name, counts.dtype, str(exc)) from exc
        if is_bool_dtype(counts):
            counts = counts.astype("float64")
    if is_bool_dtype(counts) or is_complex_dtype(counts) or not is_numeric_dtype(counts):
        raise TypeMismatch(name, counts.dtype)
    return counts.to_numpy(dtype="float64", na_value=np.nan)


def _take(values: np.ndarray, codes: np.ndarray) -> np.ndarray:
    """Per-row lookup of ``values`` by factorized code; code -1 gives NaN."""
    out = np.full(len(codes), np.nan)
    found = codes >= 0
    out[found] = values[codes[found]]
    return out


def _regroup(out: pd.DataFrame, grouped: DataFrameGroupBy) -> DataFrameGroupBy:
    """Group ``out`` the way ``grouped`` was, with its column selection if any."""
    frame = grouped.obj
    if isinstance(grouped.keys, list):
        keys = [_original_key(frame, key) for key in grouped.keys]
    else:
        keys = _original_key(frame, grouped.keys)

    regrouped = out.groupby(
        by=keys,
        level=grouped.level,
        as_index=grouped.as_index,
        sort=grouped.sort,
        group_keys=grouped.group_keys,
        observed=grouped.observed,
        dropna=grouped.dropna,
    )

    selection = grouped._selection
    if selection is None:
        return regrouped
    selected = list(selection)
    return regrouped[selected + [name for name in OUTPUT_COLUMNS if name not in selected]]


def _original_key(frame: pd.DataFrame, key):
    # A key column overwritten by the output keeps grouping by its input values
    if isinstance(key, str) and key in OUTPUT_COLUMNS and key in frame.columns:
        return frame[key]
    return key
