# SPDX-FileCopyrightText: Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES.
# SPDX-License-Identifier: Apache-2.0

"""A scalar, with some properties."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pyarrow as pa

from regexp_udf.containers import DataType

if TYPE_CHECKING:
    from typing_extensions import Self

__all__: list[str] = ["Scalar"]


class Scalar:
    """A single arrow value and its type."""

    __slots__ = ("dtype", "obj")
    obj: pa.Scalar
    dtype: DataType

    def __init__(self, scalar: pa.Scalar, dtype: DataType | None = None):
        self.obj = scalar
        self.dtype = DataType.from_arrow(scalar.type) if dtype is None else dtype

    @classmethod
    def from_py(cls, value: Any, dtype: DataType) -> Self:
        """Create a Scalar of ``dtype`` from a python value."""
        return cls(pa.scalar(value, type=dtype.arrow_type), dtype)

    @property
    def is_valid(self) -> bool:
        """Whether the scalar holds a value."""
        return self.obj.is_valid

    @property
    def value(self) -> Any:
        """The python value of the scalar, ``None`` if null."""
        return self.obj.as_py()

    def __repr__(self) -> str:
        """Representation of the scalar."""
        return f"Scalar({self.value!r}, dtype={self.dtype!r})"
