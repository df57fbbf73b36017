"""Dependency metadata extraction: term splitting, field classification and aggregation."""

from metadata.aggregate import drop_fields, fold_entries, select_fields, update_meta_dep
from metadata.extractor import classify, extract, extract_fields, normalize, split_terms
from metadata.scan import extract_meta_data

__all__ = [
    "classify",
    "drop_fields",
    "extract",
    "extract_fields",
    "extract_meta_data",
    "fold_entries",
    "normalize",
    "select_fields",
    "split_terms",
    "update_meta_dep",
]
