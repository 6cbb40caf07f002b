# SPDX-FileCopyrightText: Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES.
# SPDX-License-Identifier: Apache-2.0

"""Containers of concrete data."""

from __future__ import annotations

__all__: list[str] = ["Column", "ColumnarValue", "DataType", "Scalar"]

# column.py & scalar.py import DataType, so import in this order to avoid circular import
from regexp_udf.containers.datatype import DataType  # noqa: I001
from regexp_udf.containers.column import Column
from regexp_udf.containers.scalar import Scalar

ColumnarValue = Column | Scalar
"""A value handed to a scalar function by the host: a column or a scalar."""
