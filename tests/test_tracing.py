# SPDX-FileCopyrightText: Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any

import pytest
import structlog
import structlog.testing

import pyarrow as pa

from regexp_udf import PatternCompileError, create_regexp_extract
from regexp_udf.containers import Column, Scalar
from regexp_udf.tracing import make_snapshot
from regexp_udf.utils.config import ConfigOptions


@pytest.fixture(name="log_output")
def fixture_log_output():
    return structlog.testing.LogCapture()


@pytest.fixture(autouse=True)
def fixture_configure_structlog(log_output):
    structlog.configure(processors=[log_output])
    yield
    structlog.reset_defaults()


def test_trace_basic(log_output: Any) -> None:
    udf = create_regexp_extract(ConfigOptions(log_traces=True))
    udf.invoke(["hello123", None, "abc"], r"([a-z]+)(\d+)", 2)

    assert len(log_output.entries) == 1
    result = dict(log_output.entries[0])
    # pop non-deterministic values
    start = result.pop("start")
    stop = result.pop("stop")
    assert result.pop("duration") == stop - start

    expected = {
        "event": "regexp_extract",
        "log_level": "info",
        "count_rows_input": 3,
        "count_nulls_input": 1,
        "scalars": [r"([a-z]+)(\d+)", 2],
        "count_rows_output": 3,
        "count_nulls_output": 1,
    }
    assert result == expected


def test_trace_failure(log_output: Any) -> None:
    udf = create_regexp_extract(ConfigOptions(log_traces=True))
    with pytest.raises(PatternCompileError):
        udf.invoke(["abc"], r"(", 1)

    assert len(log_output.entries) == 1
    (entry,) = log_output.entries
    assert entry["event"] == "regexp_extract failed"
    assert entry["log_level"] == "warning"
    assert entry["error"] == "PatternCompileError"


def test_no_trace_by_default(log_output: Any) -> None:
    udf = create_regexp_extract(ConfigOptions(log_traces=False))
    udf.invoke(["hello123"], r"(\d+)", 1)
    assert log_output.entries == []


def test_make_snapshot_output_phase() -> None:
    column = Column(pa.array(["a", None]))
    snapshot = make_snapshot([column], phase="output", extra={"x": 1})
    assert snapshot == {"count_rows_output": 2, "count_nulls_output": 1, "x": 1}


def test_make_snapshot_input_phase() -> None:
    values = [Column(pa.array(["a"])), Scalar(pa.scalar("p")), Scalar(pa.scalar(0))]
    snapshot = make_snapshot(values)
    assert snapshot == {
        "count_rows_input": 1,
        "count_nulls_input": 0,
        "scalars": ["p", 0],
    }
