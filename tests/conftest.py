"""Shared test configuration and fixtures."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from nominal_ml.data import NominalAttribute, NominalDataset


def encode(
    attributes: Sequence[NominalAttribute],
    rows: Sequence[Sequence[str]],
    name: str = "dataset",
) -> NominalDataset:
    """Build a dataset (class last) from rows of labels."""
    header = NominalDataset(attributes, name=name)
    return NominalDataset(attributes, [header.make_row(r) for r in rows], name=name)


# ============================================================================
# Classic Datasets
# ============================================================================


WEATHER_ROWS = [
    ("sunny", "hot", "high", "FALSE", "no"),
    ("sunny", "hot", "high", "TRUE", "no"),
    ("overcast", "hot", "high", "FALSE", "yes"),
    ("rainy", "mild", "high", "FALSE", "yes"),
    ("rainy", "cool", "normal", "FALSE", "yes"),
    ("rainy", "cool", "normal", "TRUE", "no"),
    ("overcast", "cool", "normal", "TRUE", "yes"),
    ("sunny", "mild", "high", "FALSE", "no"),
    ("sunny", "cool", "normal", "FALSE", "yes"),
    ("rainy", "mild", "normal", "FALSE", "yes"),
    ("sunny", "mild", "normal", "TRUE", "yes"),
    ("overcast", "mild", "high", "TRUE", "yes"),
    ("overcast", "hot", "normal", "FALSE", "yes"),
    ("rainy", "mild", "high", "TRUE", "no"),
]


@pytest.fixture
def weather_attributes() -> list[NominalAttribute]:
    """Header of the nominal weather (play tennis) data."""
    return [
        NominalAttribute("outlook", ("sunny", "overcast", "rainy")),
        NominalAttribute("temperature", ("hot", "mild", "cool")),
        NominalAttribute("humidity", ("high", "normal")),
        NominalAttribute("windy", ("FALSE", "TRUE")),
        NominalAttribute("play", ("yes", "no")),
    ]


@pytest.fixture
def weather(weather_attributes: list[NominalAttribute]) -> NominalDataset:
    """The 14-row nominal weather dataset."""
    return encode(weather_attributes, WEATHER_ROWS, name="weather")


# ============================================================================
# Toy Datasets
# ============================================================================


@pytest.fixture
def binary_attributes() -> list[NominalAttribute]:
    """Two binary attributes and a binary class."""
    return [
        NominalAttribute("a", ("0", "1")),
        NominalAttribute("b", ("0", "1")),
        NominalAttribute("class", ("0", "1")),
    ]


@pytest.fixture
def xor(binary_attributes: list[NominalAttribute]) -> NominalDataset:
    """XOR-labeled rows over two binary attributes."""
    rows = [("0", "0", "0"), ("0", "1", "1"), ("1", "0", "1"), ("1", "1", "0")]
    return encode(binary_attributes, rows, name="xor")


@pytest.fixture
def skewed(binary_attributes: list[NominalAttribute]) -> NominalDataset:
    """Four rows where `a` leans towards class 1 and `b` towards class 0."""
    rows = [("0", "0", "0"), ("0", "1", "0"), ("1", "0", "1"), ("0", "0", "1")]
    return encode(binary_attributes, rows, name="skewed")


@pytest.fixture
def single_class(binary_attributes: list[NominalAttribute]) -> NominalDataset:
    """Rows that all share class 0."""
    rows = [("0", "0", "0"), ("0", "1", "0"), ("1", "1", "0")]
    return encode(binary_attributes, rows, name="single_class")


@pytest.fixture
def empty(binary_attributes: list[NominalAttribute]) -> NominalDataset:
    """Header only, no rows."""
    return NominalDataset(binary_attributes, name="empty")


@pytest.fixture
def id_coded() -> NominalDataset:
    """A row-identifier attribute that determines the class, next to a useless one."""
    attributes = [
        NominalAttribute("id", ("r0", "r1", "r2", "r3")),
        NominalAttribute("noise", ("a", "b")),
        NominalAttribute("class", ("pos", "neg")),
    ]
    rows = [("r0", "a", "pos"), ("r1", "a", "neg"), ("r2", "b", "pos"), ("r3", "b", "neg")]
    return encode(attributes, rows, name="id_coded")


@pytest.fixture
def make_dataset():
    """Factory building a class-last dataset from rows of labels."""
    return encode


@pytest.fixture
def weather_labels() -> tuple[list[tuple[str, ...]], list[str]]:
    """The weather rows as raw attribute labels and class labels."""
    return [row[:-1] for row in WEATHER_ROWS], [row[-1] for row in WEATHER_ROWS]
