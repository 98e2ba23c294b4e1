"""
Nominal dataset container.

Every attribute, the class included, takes its values from a fixed, ordered set of
labels. Rows store value indices for every attribute slot, class slot included.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

import numpy as np
import pandas as pd

from ..exceptions import DataError

logger = logging.getLogger(__name__)

__all__ = [
    "MISSING_CLASS",
    "AttributeProtocol",
    "RowProtocol",
    "DatasetProtocol",
    "NominalAttribute",
    "Row",
    "NominalDataset",
    "as_matrix",
    "check_row_length",
    "validate_dataset",
]

# Class slot of an unlabeled row.
MISSING_CLASS = -1


@runtime_checkable
class AttributeProtocol(Protocol):
    """Read-only view of a nominal attribute."""

    name: str

    @property
    def num_values(self) -> int:
        """Number of possible values."""
        ...


@runtime_checkable
class RowProtocol(Protocol):
    """Read-only view of a row of value indices."""

    def value(self, attribute_index: int) -> int:
        """Value index stored in an attribute slot."""
        ...

    @property
    def class_value(self) -> int:
        """Value index stored in the class slot."""
        ...

    @property
    def num_values(self) -> int:
        """Number of attribute slots, class slot included."""
        ...


@runtime_checkable
class DatasetProtocol(Protocol):
    """Read-only interface the classifiers consume."""

    @property
    def num_instances(self) -> int: ...

    @property
    def num_attributes(self) -> int: ...

    @property
    def class_index(self) -> int: ...

    @property
    def num_classes(self) -> int: ...

    def attribute(self, index: int) -> AttributeProtocol: ...

    def row(self, index: int) -> RowProtocol: ...


@dataclass(frozen=True)
class NominalAttribute:
    """A categorical attribute with an ordered tuple of value labels."""

    name: str
    values: tuple[str, ...]
    _index: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        values = tuple(str(v) for v in self.values)
        if not values:
            raise DataError(f"Attribute '{self.name}' declares no values.")
        if len(set(values)) != len(values):
            raise DataError(f"Attribute '{self.name}' declares duplicate values: {values}")
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "_index", {v: i for i, v in enumerate(values)})

    @property
    def num_values(self) -> int:
        return len(self.values)

    def index_of(self, label: Any) -> int:
        """Return the value index of a label."""
        try:
            return self._index[str(label)]
        except KeyError:
            raise DataError(
                f"Label '{label}' is not a value of attribute '{self.name}'. "
                f"Known values: {', '.join(self.values)}"
            ) from None

    def value_label(self, index: int) -> str:
        """Return the label of a value index."""
        if not 0 <= index < self.num_values:
            raise DataError(
                f"Value index {index} out of range for attribute '{self.name}' "
                f"({self.num_values} values)."
            )
        return self.values[index]


@dataclass(frozen=True)
class Row:
    """An immutable row of value indices."""

    values: tuple[int, ...]
    class_index: int

    def __post_init__(self) -> None:
        values = tuple(int(v) for v in self.values)
        n = len(values)
        if not -n <= self.class_index < n:
            raise DataError(f"Class index {self.class_index} out of range for a row of {n} values.")
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "class_index", self.class_index % n)

    def value(self, attribute_index: int) -> int:
        return self.values[attribute_index]

    @property
    def class_value(self) -> int:
        return self.values[self.class_index]

    @property
    def num_values(self) -> int:
        return len(self.values)

    @property
    def is_labeled(self) -> bool:
        return self.class_value != MISSING_CLASS


class NominalDataset:
    """
    Ordered collection of rows over a fixed header of nominal attributes.

    Args:
        attributes: The attribute header, class attribute included.
        rows: Rows of value indices, either `Row` instances or plain sequences.
        class_index: Slot of the class attribute. Negative values count from the
            end, so the default designates the last attribute.
        name: Relation name, used in log and error messages.
    """

    def __init__(
        self,
        attributes: Sequence[NominalAttribute],
        rows: Iterable[Row | Sequence[int]] = (),
        class_index: int = -1,
        name: str = "dataset",
    ) -> None:
        if not attributes:
            raise DataError("A dataset needs at least one attribute.")
        n = len(attributes)
        if not -n <= class_index < n:
            raise DataError(f"Class index {class_index} out of range for {n} attributes.")
        self.name = name
        self._attributes = tuple(attributes)
        self._class_index = class_index % n
        self._rows = [self._coerce_row(r) for r in rows]

    def _coerce_row(self, row: Row | Sequence[int]) -> Row:
        if not isinstance(row, Row):
            row = Row(tuple(row), self._class_index)
        if row.num_values != self.num_attributes:
            raise DataError(
                f"Row has {row.num_values} values, dataset '{self.name}' "
                f"has {self.num_attributes} attributes."
            )
        if row.class_index != self._class_index:
            raise DataError(
                f"Row class index {row.class_index} does not match dataset "
                f"class index {self._class_index}."
            )
        return row

    # ---------- header ----------

    @property
    def num_instances(self) -> int:
        return len(self._rows)

    @property
    def num_attributes(self) -> int:
        return len(self._attributes)

    @property
    def class_index(self) -> int:
        return self._class_index

    @property
    def class_attribute(self) -> NominalAttribute:
        return self._attributes[self._class_index]

    @property
    def num_classes(self) -> int:
        return self.class_attribute.num_values

    @property
    def attributes(self) -> tuple[NominalAttribute, ...]:
        return self._attributes

    def attribute(self, index: int) -> NominalAttribute:
        return self._attributes[index]

    # ---------- rows ----------

    def row(self, index: int) -> Row:
        return self._rows[index]

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    def __repr__(self) -> str:
        return (
            f"NominalDataset(name={self.name!r}, instances={self.num_instances}, "
            f"attributes={self.num_attributes}, class={self.class_attribute.name!r})"
        )

    def subset(self, indices: Iterable[int]) -> NominalDataset:
        """Return a dataset with the same header and the selected rows, in order."""
        return NominalDataset(
            self._attributes,
            [self._rows[int(i)] for i in indices],
            self._class_index,
            name=self.name,
        )

    def make_row(self, labels: Mapping[str, Any] | Sequence[Any]) -> Row:
        """
        Encode a row of labels against this dataset's header.

        Args:
            labels: Either a mapping from attribute name to label, or a sequence of
                labels in attribute order. The class label may be left out of both,
                in which case the row carries `MISSING_CLASS`.

        Returns:
            Row: The encoded row.
        """
        if isinstance(labels, Mapping):
            values = []
            for i, attribute in enumerate(self._attributes):
                if attribute.name in labels:
                    values.append(attribute.index_of(labels[attribute.name]))
                elif i == self._class_index:
                    values.append(MISSING_CLASS)
                else:
                    raise DataError(f"No label given for attribute '{attribute.name}'.")
            return Row(tuple(values), self._class_index)

        labels = list(labels)
        if len(labels) == self.num_attributes - 1:
            labels.insert(self._class_index, None)
        if len(labels) != self.num_attributes:
            raise DataError(
                f"Expected {self.num_attributes} labels (or {self.num_attributes - 1} "
                f"without the class), got {len(labels)}."
            )
        values = [
            MISSING_CLASS if i == self._class_index and label is None else attribute.index_of(label)
            for i, (attribute, label) in enumerate(zip(self._attributes, labels))
        ]
        return Row(tuple(values), self._class_index)

    def to_numpy(self) -> np.ndarray:
        """Return the rows as an (instances, attributes) integer matrix."""
        return as_matrix(self)

    def validate(self) -> NominalDataset:
        """Check every row against the header. Returns self for chaining."""
        validate_dataset(self)
        return self

    # ---------- constructors ----------

    @classmethod
    def from_dataframe(
        cls,
        df: pd.DataFrame,
        class_column: str | None = None,
        attribute_values: Mapping[str, Sequence[str]] | None = None,
        name: str = "dataset",
    ) -> NominalDataset:
        """
        Build a dataset from a DataFrame of labels.

        Categorical columns keep their category order. Other columns take their
        sorted unique labels unless `attribute_values` declares them.

        Args:
            df: One column per attribute, one row per instance.
            class_column: Name of the class column. Defaults to the last column.
            attribute_values: Optional declared value sets per column, which may
                include values that never occur in `df`.
            name: Relation name.

        Returns:
            NominalDataset: The encoded dataset.
        """
        if df.columns.empty:
            raise DataError("DataFrame has no columns.")
        attribute_values = attribute_values or {}
        columns = [str(c) for c in df.columns]
        class_column = columns[-1] if class_column is None else class_column
        if class_column not in columns:
            raise DataError(f"Class column '{class_column}' not found in {columns}.")

        attributes = []
        codes = []
        for column, series in zip(columns, (df[c] for c in df.columns)):
            if series.isna().any():
                raise DataError(f"Column '{column}' contains missing values.")
            if column in attribute_values:
                values = [str(v) for v in attribute_values[column]]
            elif isinstance(series.dtype, pd.CategoricalDtype):
                values = [str(v) for v in series.cat.categories]
            else:
                values = sorted(series.astype(str).unique().tolist())
            attribute = NominalAttribute(column, tuple(values))
            labels = series.astype(str)
            unknown = sorted(set(labels) - set(attribute.values))
            if unknown:
                raise DataError(f"Column '{column}' has undeclared labels: {unknown}")
            column_codes = pd.Categorical(labels, categories=list(attribute.values)).codes
            attributes.append(attribute)
            codes.append(column_codes)

        matrix = np.column_stack(codes) if len(df) else np.empty((0, len(columns)), dtype=np.int64)
        dataset = cls(attributes, matrix.tolist(), columns.index(class_column), name=name)
        logger.debug(f"Loaded {dataset!r} from DataFrame")
        return dataset

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        class_column: str | None = None,
        attribute_values: Mapping[str, Sequence[str]] | None = None,
        name: str = "dataset",
    ) -> NominalDataset:
        """Build a dataset from an iterable of label mappings."""
        records = list(records)
        if attribute_values and not records:
            df = pd.DataFrame(columns=list(attribute_values))
        else:
            df = pd.DataFrame.from_records(records)
        return cls.from_dataframe(
            df, class_column=class_column, attribute_values=attribute_values, name=name
        )


def as_matrix(dataset: DatasetProtocol) -> np.ndarray:
    """Return the value indices of a dataset as an (instances, attributes) matrix."""
    n, m = dataset.num_instances, dataset.num_attributes
    matrix = np.empty((n, m), dtype=np.int64)
    for i in range(n):
        row = dataset.row(i)
        matrix[i] = [row.value(j) for j in range(m)]
    return matrix


def check_row_length(row: RowProtocol, num_attributes: int) -> None:
    """Raise DataError if a row does not match the trained header."""
    if row.num_values != num_attributes:
        raise DataError(
            f"Row has {row.num_values} values, model was trained on "
            f"{num_attributes} attributes."
        )


def validate_dataset(dataset: DatasetProtocol) -> None:
    """
    Check that a dataset is usable for training.

    Every row must have one value per attribute, every value must lie inside its
    attribute's range, and every class value must lie inside the class range.

    Raises:
        DataError: On the first inconsistency found.
    """
    m = dataset.num_attributes
    class_index = dataset.class_index
    if not 0 <= class_index < m:
        raise DataError(f"Class index {class_index} out of range for {m} attributes.")
    if dataset.num_classes < 1:
        raise DataError("Class attribute declares no values.")
    num_values = [dataset.attribute(j).num_values for j in range(m)]
    for i in range(dataset.num_instances):
        row = dataset.row(i)
        if row.num_values != m:
            raise DataError(f"Row {i} has {row.num_values} values, expected {m}.")
        for j in range(m):
            value = row.value(j)
            if not 0 <= value < num_values[j]:
                kind = "class value" if j == class_index else "value"
                raise DataError(
                    f"Row {i} has {kind} {value} for attribute "
                    f"'{dataset.attribute(j).name}' ({num_values[j]} values)."
                )
