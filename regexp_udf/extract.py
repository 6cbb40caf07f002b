# SPDX-FileCopyrightText: Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES.
# SPDX-License-Identifier: Apache-2.0

"""
Extraction of a capture group from strings.

The null and empty string rules follow Spark's ``regexp_extract``:
a null input gives null, while a present input that does not match,
or whose group did not take part in the match, gives ``""``.
"""

from __future__ import annotations

import pyarrow as pa

from regexp_udf.containers import Column
from regexp_udf.exceptions import ArgumentTypeError
from regexp_udf.regex import RegexProgram

__all__: list[str] = ["extract", "regexp_extract"]


def extract(program: RegexProgram, value: str | None, group_index: int) -> str | None:
    """
    Extract one capture group from a single value.

    Parameters
    ----------
    program
        Compiled pattern.
    value
        String to search, or ``None``.
    group_index
        Capture group to return, ``0`` for the whole match.

    Returns
    -------
    ``None`` if ``value`` is ``None``, otherwise the captured text, or
    ``""`` if there is no match, the group does not exist, or the group
    did not participate in the match.
    """
    if value is None:
        return None
    match = program.search(value)
    if match is None or group_index > program.groups_count:
        return ""
    # Non-participating groups are None
    return match.group(group_index) or ""


def regexp_extract(
    column: Column, pattern: str | RegexProgram, group_index: int
) -> Column:
    """
    Extract a capture group from every string of a column.

    Parameters
    ----------
    column
        String column to search.
    pattern
        Regular expression source, or an already compiled program.
    group_index
        Capture group to return, ``0`` for the whole match.

    Returns
    -------
    New column of the same type, length and null positions as ``column``.

    Raises
    ------
    ArgumentTypeError
        If ``column`` does not hold strings, ``pattern`` is neither a
        string nor a program, or ``group_index`` is not a non-negative
        integer.
    PatternCompileError
        If ``pattern`` is not a valid regular expression.

    Examples
    --------
    >>> import pyarrow as pa
    >>> from regexp_udf.containers import Column
    >>> column = Column(pa.array(["hello123", "world456", None]))
    >>> regexp_extract(column, r"([a-z]+)(\\d+)", 1).to_pylist()
    ['hello', 'world', None]
    """
    if not column.dtype.is_string():
        raise ArgumentTypeError(f"Expected a string column, got {column.dtype!r}")
    if isinstance(group_index, bool) or not isinstance(group_index, int):
        raise ArgumentTypeError(
            f"group_index must be an integer, got {type(group_index).__name__}"
        )
    if group_index < 0:
        raise ArgumentTypeError(f"group_index must be non-negative, got {group_index}")
    if isinstance(pattern, RegexProgram):
        program = pattern
    elif isinstance(pattern, str):
        program = RegexProgram.create(pattern)
    else:
        raise ArgumentTypeError(
            f"pattern must be a string or RegexProgram, got {type(pattern).__name__}"
        )
    return Column(
        pa.array(
            [extract(program, value, group_index) for value in column],
            type=column.dtype.arrow_type,
        ),
        dtype=column.dtype,
        name=column.name,
    )
