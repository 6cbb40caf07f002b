# SPDX-FileCopyrightText: Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES.
# SPDX-License-Identifier: Apache-2.0

"""Bind scalar functions into polars queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

import polars as pl

from regexp_udf.containers import Column
from regexp_udf.exceptions import ArgumentTypeError
from regexp_udf.regex import RegexProgram
from regexp_udf.udf import as_columnar_value, create_regexp_extract

if TYPE_CHECKING:
    from regexp_udf.udf import ScalarUDF

__all__: list[str] = ["regexp_extract"]


def regexp_extract(
    expr: pl.Expr | str,
    pattern: str,
    group_index: int,
    *,
    udf: ScalarUDF | None = None,
) -> pl.Expr:
    """
    Extract a capture group from a polars string expression.

    Parameters
    ----------
    expr
        String expression, or the name of a string column.
    pattern
        Regular expression source.
    group_index
        Capture group to return, ``0`` for the whole match.
    udf
        Function to evaluate with, a new one from
        :func:`~regexp_udf.udf.create_regexp_extract` if not given.

    Returns
    -------
    Expression evaluating ``regexp_extract`` batch-wise.

    Raises
    ------
    ArgumentTypeError
        If ``pattern`` or ``group_index`` have the wrong type.
    PatternCompileError
        If ``pattern`` is not a valid regular expression.

    Notes
    -----
    Unlike ``Expr.str.extract``, a value that does not match gives an
    empty string rather than null. Only null inputs give null.

    Examples
    --------
    >>> import polars as pl
    >>> df = pl.DataFrame({"a": ["hello123", None]})
    >>> df.select(regexp_extract("a", r"(\\d+)", 1))["a"].to_list()
    ['123', None]
    """
    if isinstance(expr, str):
        expr = pl.col(expr)
    if udf is None:
        udf = create_regexp_extract()
    _, pattern_type, index_type = udf.input_types
    # Fail at query construction, not in the middle of a collect
    if not isinstance(pattern, str):
        raise ArgumentTypeError(
            f"pattern must be a string, got {type(pattern).__name__}"
        )
    pattern_arg = as_columnar_value(pattern, pattern_type)
    RegexProgram.create(pattern_arg.value)
    index_arg = as_columnar_value(group_index, index_type)

    def evaluate(series: pl.Series) -> pl.Series:
        if series.dtype == pl.Null:
            # All-null columns carry no string type
            series = series.cast(pl.String)
        column = Column(
            series.to_arrow(compat_level=pl.CompatLevel.oldest()), name=series.name
        )
        result = udf([column, pattern_arg, index_arg])
        return pl.Series(series.name, result.obj)

    return expr.map_batches(evaluate, return_dtype=pl.String, is_elementwise=True)
