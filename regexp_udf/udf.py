# SPDX-FileCopyrightText: Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES.
# SPDX-License-Identifier: Apache-2.0

"""Scalar function objects for a columnar host engine."""

from __future__ import annotations

import enum
import itertools
from typing import TYPE_CHECKING, Any

import polars as pl
import pyarrow as pa

from regexp_udf.containers import Column, DataType, Scalar
from regexp_udf.exceptions import ArgumentTypeError
from regexp_udf.extract import regexp_extract
from regexp_udf.regex import PatternCache
from regexp_udf.tracing import log_evaluate
from regexp_udf.utils.config import ConfigOptions

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from regexp_udf.containers import ColumnarValue

__all__: list[str] = [
    "RegexpExtract",
    "ScalarUDF",
    "Volatility",
    "as_columnar_value",
    "create_regexp_extract",
]


# TODO: Use enum.StrEnum when we drop Python 3.10
class Volatility(str, enum.Enum):
    """
    How the result of a function depends on its inputs.

    * ``Volatility.IMMUTABLE`` : Same inputs always give the same output,
      the host may fold constants and cache results.
    * ``Volatility.STABLE`` : Same inputs give the same output within one query.
    * ``Volatility.VOLATILE`` : May give a different output on every call.
    """

    IMMUTABLE = "immutable"
    STABLE = "stable"
    VOLATILE = "volatile"


def as_columnar_value(value: Any, dtype: DataType | None = None) -> ColumnarValue:
    """
    Wrap a python or arrow value as a column or scalar.

    Parameters
    ----------
    value
        Arrow arrays and python lists or tuples become columns, arrow
        scalars and other python objects become scalars. Existing
        columns and scalars are returned unchanged.
    dtype
        Type to convert python objects to. Inferred by arrow if not given.

    Returns
    -------
    The wrapped value.

    Raises
    ------
    ArgumentTypeError
        If ``value`` cannot be converted to ``dtype``.
    """
    if isinstance(value, (Column, Scalar)):
        return value
    try:
        if isinstance(value, (pa.Array, pa.ChunkedArray)):
            return Column(value)
        elif isinstance(value, pa.Scalar):
            return Scalar(value)
        elif isinstance(value, (list, tuple)):
            if dtype is None:
                return Column(pa.array(value))
            return Column.from_pylist(value, dtype)
        elif dtype is None:
            return Scalar(pa.scalar(value))
        else:
            return Scalar.from_py(value, dtype)
    except (pa.ArrowException, OverflowError, NotImplementedError) as e:
        raise ArgumentTypeError(f"Cannot convert {value!r} to {dtype!r}") from e


def _describe(value: Any) -> str:
    if isinstance(value, Column):
        return f"a column of {value.dtype!r}"
    return repr(value)


class ScalarUDF:
    """
    A named scalar function as registered with a host engine.

    Parameters
    ----------
    name
        Name the function is registered under.
    input_types
        Declared types of the positional arguments.
    return_type
        Declared type of the result.
    volatility
        How the result depends on the inputs.
    fun
        Implementation, called with the list of argument values.
    """

    __slots__ = ("fun", "input_types", "name", "return_type", "volatility")
    name: str
    input_types: tuple[DataType, ...]
    return_type: DataType
    volatility: Volatility
    fun: Callable[[Sequence[ColumnarValue]], ColumnarValue]

    def __init__(
        self,
        name: str,
        input_types: Sequence[DataType],
        return_type: DataType,
        volatility: Volatility,
        fun: Callable[[Sequence[ColumnarValue]], ColumnarValue],
    ) -> None:
        self.name = name
        self.input_types = tuple(input_types)
        self.return_type = return_type
        self.volatility = Volatility(volatility)
        self.fun = fun

    def __call__(self, args: Sequence[ColumnarValue]) -> ColumnarValue:
        """Evaluate the function on host values."""
        return self.fun(args)

    def invoke(self, *values: Any) -> ColumnarValue:
        """
        Evaluate the function on python or arrow values.

        Each value is wrapped with :func:`as_columnar_value`, using the
        declared input type at its position.
        """
        hints = itertools.chain(self.input_types, itertools.repeat(None))
        return self(
            [as_columnar_value(value, dtype) for value, dtype in zip(values, hints)]
        )

    def __repr__(self) -> str:
        """Representation of the function."""
        types = ", ".join(str(dtype.polars_type) for dtype in self.input_types)
        return (
            f"ScalarUDF({self.name}({types}) -> {self.return_type.polars_type}, "
            f"volatility={self.volatility.value})"
        )


class RegexpExtract:
    """
    Columnar implementation of ``regexp_extract(input, pattern, group_index)``.

    Parameters
    ----------
    config
        Options controlling pattern caching and tracing.
    """

    __slots__ = ("_cache", "config")
    config: ConfigOptions
    _cache: PatternCache

    def __init__(self, config: ConfigOptions) -> None:
        self.config = config
        self._cache = PatternCache(config.pattern_cache_size)

    @staticmethod
    def _unpack(args: Sequence[ColumnarValue]) -> tuple[Column, str, int]:
        if len(args) != 3:
            raise ArgumentTypeError(
                f"regexp_extract expects 3 arguments, got {len(args)}"
            )
        column, pattern, group_index = args
        if not (isinstance(column, Column) and column.dtype.is_string()):
            raise ArgumentTypeError(
                "regexp_extract expects a string column as input, "
                f"got {_describe(column)}"
            )
        if not (
            isinstance(pattern, Scalar)
            and pattern.dtype.is_string()
            and pattern.is_valid
        ):
            raise ArgumentTypeError(
                "regexp_extract expects a non-null string pattern, "
                f"got {_describe(pattern)}"
            )
        if not (
            isinstance(group_index, Scalar)
            and group_index.dtype.is_unsigned_integer()
            and group_index.is_valid
        ):
            raise ArgumentTypeError(
                "regexp_extract expects a non-null unsigned integer group index, "
                f"got {_describe(group_index)}"
            )
        return column, pattern.value, group_index.value

    @log_evaluate
    def __call__(self, args: Sequence[ColumnarValue]) -> Column:
        """Evaluate on a batch of values."""
        column, pattern, group_index = self._unpack(args)
        return regexp_extract(column, self._cache.get(pattern), group_index)

    @property
    def pattern_cache(self) -> PatternCache:
        """The compiled patterns of this implementation."""
        return self._cache


def create_regexp_extract(config: ConfigOptions | None = None) -> ScalarUDF:
    """
    Create the ``regexp_extract`` scalar function.

    Parameters
    ----------
    config
        Options for the function, read from the environment if not given.

    Returns
    -------
    Function accepting a string column, a string pattern scalar and an
    unsigned integer group index scalar, and returning a string column.

    Examples
    --------
    >>> udf = create_regexp_extract()
    >>> udf.invoke(["hello123", "world456", None], r"([a-z]+)(\\d+)", 1).to_pylist()
    ['hello', 'world', None]
    """
    string = DataType(pl.String())
    return ScalarUDF(
        "regexp_extract",
        [string, string, DataType(pl.UInt32())],
        string,
        Volatility.IMMUTABLE,
        RegexpExtract(ConfigOptions() if config is None else config),
    )
