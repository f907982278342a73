"""Immutable tabular dataset.

A Dataset is an ordered sequence of rows, each a mapping from column name to
a scalar value. All rows share the same column set. Datasets are supplied by
an external loader; ``from_frame`` accepts a pandas DataFrame directly.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Any

import numpy as np
import pandas as pd

from tablecraft.errors import ConfigurationError

logger = logging.getLogger(__name__)

__all__ = ["Dataset", "is_missing"]


def is_missing(value: Any) -> bool:
    """Return True if a raw value is a missing marker.

    None, float NaN, ``pandas.NA`` and ``pandas.NaT`` are missing markers.
    Non-scalar values are never treated as missing.

    Args:
        value: Raw cell value

    Returns:
        Whether the value is missing

    """
    if value is None:
        return True
    if not pd.api.types.is_scalar(value):
        return False
    return bool(pd.isna(value))


def _unwrap(value: Any) -> Any:
    """Convert numpy scalars to their Python equivalents."""
    if isinstance(value, np.generic):
        return value.item()
    return value


class Dataset:
    """Ordered, immutable rows of named scalar fields."""

    __slots__ = ("_columns", "_rows")

    def __init__(
        self,
        columns: Sequence[str],
        rows: Iterable[Mapping[str, Any]] = (),
    ) -> None:
        """Initialize dataset.

        Args:
            columns: Ordered column names
            rows: Rows, each mapping every column name to a value

        Raises:
            ConfigurationError: If column names repeat or a row's keys differ
                from the column set

        """
        column_tuple = tuple(columns)
        if len(set(column_tuple)) != len(column_tuple):
            raise ConfigurationError(f"Duplicate column names in dataset: {list(column_tuple)}")

        expected = set(column_tuple)
        frozen_rows = []
        for index, row in enumerate(rows):
            keys = set(row.keys())
            if keys != expected:
                missing = sorted(expected - keys)
                extra = sorted(keys - expected)
                raise ConfigurationError(
                    f"Row {index} does not match dataset columns "
                    f"(missing: {missing}, unexpected: {extra})"
                )
            frozen_rows.append(MappingProxyType({name: row[name] for name in column_tuple}))

        self._columns = column_tuple
        self._rows = tuple(frozen_rows)

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        columns: Sequence[str] | None = None,
    ) -> Dataset:
        """Build a dataset from a sequence of mappings.

        Args:
            records: Row mappings
            columns: Explicit column order; defaults to the first record's key order

        Returns:
            New Dataset

        """
        records = list(records)
        if columns is None:
            columns = list(records[0].keys()) if records else []
        return cls(columns, records)

    @classmethod
    def from_frame(cls, frame: pd.DataFrame) -> Dataset:
        """Build a dataset from a pandas DataFrame.

        Column order is preserved and NaN/NA/NaT stay as missing markers.

        Args:
            frame: Source DataFrame

        Returns:
            New Dataset

        """
        columns = [str(column) for column in frame.columns]
        rows = [
            {name: _unwrap(value) for name, value in zip(columns, values)}
            for values in frame.itertuples(index=False, name=None)
        ]
        logger.debug("Loaded dataset from frame: %d rows, %d columns", len(rows), len(columns))
        return cls(columns, rows)

    @property
    def columns(self) -> tuple[str, ...]:
        """Ordered column names."""
        return self._columns

    @property
    def rows(self) -> tuple[Mapping[str, Any], ...]:
        """Read-only row mappings."""
        return self._rows

    def column_values(self, name: str) -> list[Any]:
        """Return the values of a single column in row order.

        Raises:
            KeyError: If the column does not exist

        """
        if name not in self._columns:
            raise KeyError(name)
        return [row[name] for row in self._rows]

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Mapping[str, Any]]:
        return iter(self._rows)

    def __repr__(self) -> str:
        return f"Dataset(columns={list(self._columns)!r}, rows={len(self._rows)})"
