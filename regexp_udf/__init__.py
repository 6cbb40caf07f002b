# SPDX-FileCopyrightText: Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES.
# SPDX-License-Identifier: Apache-2.0

"""
Spark compatible ``regexp_extract`` for columnar engines.

This package implements extraction of a regular expression capture
group from every value of an arrow string column, with the null and
empty string semantics of Spark.
"""

from __future__ import annotations

from regexp_udf._version import __git_commit__, __version__
from regexp_udf.exceptions import (
    ArgumentTypeError,
    PatternCompileError,
    RegexpExtractError,
)
from regexp_udf.extract import extract, regexp_extract
from regexp_udf.udf import ScalarUDF, Volatility, create_regexp_extract

# Check we have a supported polars version
from regexp_udf.utils.versions import _ensure_polars_version

_ensure_polars_version()
del _ensure_polars_version

__all__: list[str] = [
    "ArgumentTypeError",
    "PatternCompileError",
    "RegexpExtractError",
    "ScalarUDF",
    "Volatility",
    "__git_commit__",
    "__version__",
    "create_regexp_extract",
    "extract",
    "regexp_extract",
]
