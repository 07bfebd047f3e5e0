"""
Bind tf, idf and tf-idf to a long-form document-term table.

    >>> import pandas as pd
    >>> from tidy_tfidf import bind_tf_idf
    >>> words = pd.DataFrame({"word": ["a", "b", "a"], "book": ["X", "X", "Y"], "n": [2, 1, 1]})
    >>> bind_tf_idf(words, "word", "book", "n")["tf_idf"].round(3).tolist()
    [0.0, 0.231, 0.0]
"""

import logging

from .columns import ColumnRef, col
from .config import IDF_COLUMN, OUTPUT_COLUMNS, TF_COLUMN, TF_IDF_COLUMN
from .errors import ColumnNotFound, TfIdfError, TypeMismatch
from .tf_idf import bind_tf_idf, bind_tf_idf_string

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ColumnNotFound",
    "ColumnRef",
    "IDF_COLUMN",
    "OUTPUT_COLUMNS",
    "TF_COLUMN",
    "TF_IDF_COLUMN",
    "TfIdfError",
    "TypeMismatch",
    "bind_tf_idf",
    "bind_tf_idf_string",
    "col",
]
