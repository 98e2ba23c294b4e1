"""Nominal dataset package."""

from .dataset import (
    MISSING_CLASS,
    AttributeProtocol,
    DatasetProtocol,
    NominalAttribute,
    NominalDataset,
    Row,
    RowProtocol,
    as_matrix,
    check_row_length,
    validate_dataset,
)

__all__ = [
    "MISSING_CLASS",
    "AttributeProtocol",
    "DatasetProtocol",
    "NominalAttribute",
    "NominalDataset",
    "Row",
    "RowProtocol",
    "as_matrix",
    "check_row_length",
    "validate_dataset",
]
