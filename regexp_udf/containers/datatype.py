# SPDX-FileCopyrightText: Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES.
# SPDX-License-Identifier: Apache-2.0

"""A datatype, preserving polars metadata."""

from __future__ import annotations

from functools import cache

import polars as pl
import pyarrow as pa

__all__ = ["DataType"]


@cache
def _from_polars(dtype: pl.DataType) -> pa.DataType:
    """
    Convert a polars datatype to an arrow one.

    Parameters
    ----------
    dtype
        Polars dtype to convert

    Returns
    -------
    Matching arrow DataType object.

    Raises
    ------
    NotImplementedError
        For unsupported conversions.
    """
    if isinstance(dtype, pl.Boolean):
        return pa.bool_()
    elif isinstance(dtype, pl.Int8):
        return pa.int8()
    elif isinstance(dtype, pl.Int16):
        return pa.int16()
    elif isinstance(dtype, pl.Int32):
        return pa.int32()
    elif isinstance(dtype, pl.Int64):
        return pa.int64()
    if isinstance(dtype, pl.UInt8):
        return pa.uint8()
    elif isinstance(dtype, pl.UInt16):
        return pa.uint16()
    elif isinstance(dtype, pl.UInt32):
        return pa.uint32()
    elif isinstance(dtype, pl.UInt64):
        return pa.uint64()
    elif isinstance(dtype, pl.String):
        return pa.string()
    elif isinstance(dtype, pl.Null):
        return pa.null()
    else:
        raise NotImplementedError(f"{dtype=} conversion not supported")


def _to_polars(dtype: pa.DataType) -> pl.DataType:
    """
    Convert an arrow datatype to a polars one.

    Both ``string`` and ``large_string`` map to ``pl.String``.
    """
    if pa.types.is_string(dtype) or pa.types.is_large_string(dtype):
        return pl.String()
    elif pa.types.is_boolean(dtype):
        return pl.Boolean()
    elif pa.types.is_null(dtype):
        return pl.Null()
    for polars_type in (
        pl.Int8,
        pl.Int16,
        pl.Int32,
        pl.Int64,
        pl.UInt8,
        pl.UInt16,
        pl.UInt32,
        pl.UInt64,
    ):
        if _from_polars(polars_type()) == dtype:
            return polars_type()
    raise NotImplementedError(f"{dtype=} conversion not supported")


class DataType:
    """A datatype, preserving polars metadata."""

    polars_type: pl.datatypes.DataType
    arrow_type: pa.DataType

    def __init__(
        self, polars_dtype: pl.DataType, arrow_type: pa.DataType | None = None
    ) -> None:
        self.polars_type = polars_dtype
        # The arrow type may be wider than the default mapping
        # (large_string for pl.String), so allow it to be provided.
        self.arrow_type = (
            _from_polars(polars_dtype) if arrow_type is None else arrow_type
        )

    @classmethod
    def from_arrow(cls, dtype: pa.DataType) -> DataType:
        """Create a DataType from an arrow type, keeping that exact type."""
        return cls(_to_polars(dtype), dtype)

    def is_string(self) -> bool:
        """Is this a text type?"""
        return isinstance(self.polars_type, pl.String)

    def is_unsigned_integer(self) -> bool:
        """Is this an unsigned integer type?"""
        return pa.types.is_unsigned_integer(self.arrow_type)

    def __eq__(self, other: object) -> bool:
        """Equality of DataTypes."""
        if not isinstance(other, DataType):
            return False
        return (
            self.polars_type == other.polars_type
            and self.arrow_type == other.arrow_type
        )

    def __hash__(self) -> int:
        """Hash of the DataType."""
        return hash((self.polars_type, self.arrow_type))

    def __repr__(self) -> str:
        """Representation of the DataType."""
        return f"<DataType(polars={self.polars_type}, arrow={self.arrow_type})>"
