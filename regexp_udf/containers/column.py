# SPDX-FileCopyrightText: Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES.
# SPDX-License-Identifier: Apache-2.0

"""A column, with some properties."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pyarrow as pa

from regexp_udf.containers import DataType

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from typing_extensions import Self

__all__: list[str] = ["Column"]


class Column:
    """An immutable column of arrow data."""

    obj: pa.Array
    # Optional name, only carried through for the host's benefit.
    # Evaluation does not care about the name.
    name: str | None
    dtype: DataType

    def __init__(
        self,
        column: pa.Array | pa.ChunkedArray,
        dtype: DataType | None = None,
        *,
        name: str | None = None,
    ):
        if isinstance(column, pa.ChunkedArray):
            column = column.combine_chunks()
        self.obj = column
        self.dtype = DataType.from_arrow(column.type) if dtype is None else dtype
        self.name = name

    @classmethod
    def from_pylist(
        cls,
        values: Iterable[Any],
        dtype: DataType,
        *,
        name: str | None = None,
    ) -> Self:
        """
        Create a Column from python values.

        Parameters
        ----------
        values
            Python objects, ``None`` marks a null.
        dtype
            Type of the new column.
        name
            Optional name.

        Returns
        -------
        New column.
        """
        return cls(pa.array(list(values), type=dtype.arrow_type), dtype, name=name)

    def to_pylist(self) -> list[Any]:
        """The values of the column as python objects."""
        return self.obj.to_pylist()

    def __iter__(self) -> Iterator[Any]:
        """Iterate over python values of the column."""
        return iter(self.to_pylist())

    def __len__(self) -> int:
        """Number of rows in the column."""
        return self.size

    def rename(self, name: str | None, /) -> Self:
        """
        Return a shallow copy with a new name.

        Parameters
        ----------
        name
            New name

        Returns
        -------
        Shallow copy of self with new name set.
        """
        return type(self)(self.obj, self.dtype, name=name)

    @property
    def size(self) -> int:
        """Return the size of the column."""
        return len(self.obj)

    @property
    def null_count(self) -> int:
        """Return the number of Null values in the column."""
        return self.obj.null_count

    def __repr__(self) -> str:
        """Representation of the column."""
        return f"Column({self.obj.to_pylist()!r}, dtype={self.dtype!r})"
