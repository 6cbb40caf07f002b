# SPDX-FileCopyrightText: Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES.
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import pytest

import polars as pl

from regexp_udf.containers import Column, DataType
from regexp_udf.utils.config import ConfigOptions


@pytest.fixture(params=[False, True], ids=["no_nulls", "nulls"], scope="session")
def with_nulls(request):
    return request.param


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep options from the calling environment out of the tests."""
    for name in ("REGEXP_UDF__PATTERN_CACHE_SIZE", "REGEXP_UDF__LOG_TRACES"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config():
    return ConfigOptions(pattern_cache_size=16, log_traces=False)


@pytest.fixture
def string_column(with_nulls):
    values = ["hello123", "world456", "abc", "", "x1y22z333", "Wıth ünιcοde 7"]  # noqa: RUF001
    if with_nulls:
        values[1] = None
        values[-1] = None
    return Column.from_pylist(values, DataType(pl.String()))
