# SPDX-FileCopyrightText: Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES.
# SPDX-License-Identifier: Apache-2.0

"""Column assertions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import polars as pl
from polars.testing.asserts import assert_series_equal

from regexp_udf.containers import Column

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__: list[str] = ["assert_column_equal", "assert_null_mask_preserved"]


def assert_column_equal(
    result: Any,
    expect: Column | Sequence[str | None],
    *,
    check_dtypes: bool = True,
) -> None:
    """
    Assert that a result is a column holding the expected values.

    Parameters
    ----------
    result
        Value returned by a function, must be a :class:`Column`.
    expect
        Expected column, or the expected python values.
    check_dtypes
        Whether to compare arrow types as well, only used when
        ``expect`` is a :class:`Column`.

    Raises
    ------
    AssertionError
        If the result is not a column, or the values differ.
    """
    assert isinstance(result, Column), f"Expected a Column, got {type(result)}"
    if isinstance(expect, Column):
        if check_dtypes:
            assert result.dtype == expect.dtype, f"{result.dtype} != {expect.dtype}"
        expected = pl.Series(expect.obj)
    else:
        expected = pl.Series(list(expect), dtype=pl.String)
    assert_series_equal(pl.Series(result.obj), expected, check_names=False)


def assert_null_mask_preserved(result: Column, source: Column) -> None:
    """
    Assert that ``result`` has the length and null positions of ``source``.

    Raises
    ------
    AssertionError
        If the lengths or null masks differ.
    """
    assert result.size == source.size, f"{result.size} != {source.size}"
    assert result.obj.is_null().to_pylist() == source.obj.is_null().to_pylist()
