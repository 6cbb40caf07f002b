# SPDX-FileCopyrightText: Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES.
# SPDX-License-Identifier: Apache-2.0

"""Utilities for tracing scalar function calls."""

from __future__ import annotations

import functools
import time
from typing import TYPE_CHECKING, Any, Literal

import structlog

from regexp_udf.containers import Column, Scalar
from regexp_udf.exceptions import RegexpExtractError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from regexp_udf.containers import ColumnarValue
    from regexp_udf.udf import RegexpExtract


def make_snapshot(
    values: Sequence[ColumnarValue],
    extra: dict[str, Any] | None = None,
    *,
    phase: Literal["input", "output"] = "input",
) -> dict[str, Any]:
    """
    Collect statistics about the arguments or result of a call.

    Parameters
    ----------
    values
        The values to capture information for. For ``phase="input"``,
        these are the arguments of the call. For ``phase="output"``,
        this is the single result.
    extra
        Extra information to log.
    phase
        The phase of the evaluation. Either "input" or "output".
    """
    columns = [value for value in values if isinstance(value, Column)]
    d: dict[str, Any] = {
        f"count_rows_{phase}": sum(column.size for column in columns),
        f"count_nulls_{phase}": sum(column.null_count for column in columns),
    }
    if phase == "input":
        d["scalars"] = [
            value.value for value in values if isinstance(value, Scalar)
        ]
    if extra:
        d.update(extra)
    return d


def log_evaluate(
    func: Callable[[RegexpExtract, Sequence[ColumnarValue]], Column],
) -> Callable[[RegexpExtract, Sequence[ColumnarValue]], Column]:
    """
    Decorator for a function implementation's ``__call__`` that logs each call.

    Logging only happens when the implementation's configuration has
    ``log_traces`` set.

    Parameters
    ----------
    func
        The ``__call__`` method to wrap.
    """

    @functools.wraps(func)
    def wrapper(
        self: RegexpExtract,
        args: Sequence[ColumnarValue],
    ) -> Column:
        if not self.config.log_traces:
            return func(self, args)
        log = structlog.get_logger()
        start = time.monotonic_ns()
        try:
            result = func(self, args)
        except RegexpExtractError as err:
            log.warning(
                "regexp_extract failed",
                error=type(err).__name__,
                message=str(err),
            )
            raise
        stop = time.monotonic_ns()
        record = make_snapshot(args, phase="input") | make_snapshot(
            [result],
            phase="output",
            extra={"start": start, "stop": stop, "duration": stop - start},
        )
        log.info("regexp_extract", **record)
        return result

    return wrapper
