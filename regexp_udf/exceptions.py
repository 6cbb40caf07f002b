# SPDX-FileCopyrightText: Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES.
# SPDX-License-Identifier: Apache-2.0

"""Errors raised when evaluating ``regexp_extract``."""

from __future__ import annotations

__all__: list[str] = [
    "ArgumentTypeError",
    "PatternCompileError",
    "RegexpExtractError",
]


class RegexpExtractError(Exception):
    """Base class for failures of a ``regexp_extract`` call."""


class ArgumentTypeError(RegexpExtractError, TypeError):
    """Wrong number of arguments, or an argument of the wrong kind."""


class PatternCompileError(RegexpExtractError, ValueError):
    """The pattern is not a valid regular expression."""
