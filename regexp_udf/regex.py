# SPDX-FileCopyrightText: Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES.
# SPDX-License-Identifier: Apache-2.0

"""Compiled regular expressions and a cache of them."""

from __future__ import annotations

import functools
import re
from typing import TYPE_CHECKING

from regexp_udf.exceptions import PatternCompileError

if TYPE_CHECKING:
    from collections.abc import Callable

    from typing_extensions import Self

__all__: list[str] = ["PatternCache", "RegexProgram"]


class RegexProgram:
    """
    An immutable compiled regular expression.

    Use :meth:`create` rather than the constructor, it reports
    malformed patterns as :class:`~regexp_udf.exceptions.PatternCompileError`.
    """

    __slots__ = ("_regex",)
    _regex: re.Pattern[str]

    def __init__(self, regex: re.Pattern[str]) -> None:
        self._regex = regex

    @classmethod
    def create(cls, pattern: str) -> Self:
        """
        Compile a pattern.

        Parameters
        ----------
        pattern
            Regular expression source.

        Returns
        -------
        The compiled program.

        Raises
        ------
        PatternCompileError
            If the pattern is not a valid regular expression.
        """
        try:
            return cls(re.compile(pattern))
        except re.error as e:
            raise PatternCompileError(
                f"Invalid regular expression {pattern!r}: {e}"
            ) from e

    @property
    def pattern(self) -> str:
        """The source text of the program."""
        return self._regex.pattern

    @property
    def groups_count(self) -> int:
        """Number of capture groups, not counting the whole match."""
        return self._regex.groups

    def search(self, value: str) -> re.Match[str] | None:
        """Leftmost-first match of the program anywhere in ``value``."""
        return self._regex.search(value)

    def __eq__(self, other: object) -> bool:
        """Equality of programs with the same source."""
        if not isinstance(other, RegexProgram):
            return False
        return self._regex == other._regex

    def __hash__(self) -> int:
        """Hash of the program."""
        return hash(self._regex)

    def __repr__(self) -> str:
        """Representation of the program."""
        return f"RegexProgram({self.pattern!r})"


class PatternCache:
    """
    Read-through cache of compiled patterns keyed by pattern text.

    Parameters
    ----------
    maxsize
        Number of programs to keep. ``0`` disables caching and every
        lookup compiles afresh.

    Notes
    -----
    Lookups are safe to make from several threads at once, the
    underlying :func:`functools.lru_cache` is synchronised. Failed
    compilations are not cached.
    """

    __slots__ = ("_get", "maxsize")
    _get: Callable[[str], RegexProgram]
    maxsize: int

    def __init__(self, maxsize: int) -> None:
        if maxsize < 0:
            raise ValueError(f"maxsize must be non-negative, got {maxsize}")
        self.maxsize = maxsize
        if maxsize == 0:
            self._get = RegexProgram.create
        else:
            self._get = functools.lru_cache(maxsize=maxsize)(RegexProgram.create)

    def get(self, pattern: str) -> RegexProgram:
        """Return the compiled program for ``pattern``."""
        return self._get(pattern)

    def cache_info(self) -> functools._CacheInfo | None:
        """Hit/miss statistics, ``None`` when caching is disabled."""
        if self.maxsize == 0:
            return None
        return self._get.cache_info()  # type: ignore[attr-defined]

    def clear(self) -> None:
        """Drop all cached programs."""
        if self.maxsize != 0:
            self._get.cache_clear()  # type: ignore[attr-defined]
