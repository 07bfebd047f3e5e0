"""
Settings shared by the annotator.

The three output column names are fixed; they are appended (or overwritten)
on every annotated table.
"""

# ================== Output columns ==================
TF_COLUMN = "tf"
IDF_COLUMN = "idf"
TF_IDF_COLUMN = "tf_idf"

OUTPUT_COLUMNS = (TF_COLUMN, IDF_COLUMN, TF_IDF_COLUMN)
