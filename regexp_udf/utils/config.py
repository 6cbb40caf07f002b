# SPDX-FileCopyrightText: Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES.
# SPDX-License-Identifier: Apache-2.0

"""
Configuration utilities for regexp-udf.

Options default from environment variables with the prefix
``REGEXP_UDF__`` and may be overridden when creating the function:

.. code-block:: python

   >>> from regexp_udf import create_regexp_extract
   >>> from regexp_udf.utils.config import ConfigOptions
   >>> udf = create_regexp_extract(ConfigOptions(pattern_cache_size=0))

"""

from __future__ import annotations

import dataclasses
import os
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from typing_extensions import Self


__all__ = ["ConfigOptions"]


T = TypeVar("T")


def _make_default_factory(
    key: str, converter: Callable[[str], T], *, default: T
) -> Callable[[], T]:
    def default_factory() -> T:
        v = os.environ.get(key)
        if v is None:
            return default
        return converter(v)

    return default_factory


def _bool_converter(v: str) -> bool:
    lowered = v.lower()
    if lowered in {"1", "true", "yes", "y"}:
        return True
    elif lowered in {"0", "false", "no", "n"}:
        return False
    else:
        raise ValueError(f"Invalid boolean value: '{v}'")


@dataclasses.dataclass(frozen=True, eq=True)
class ConfigOptions:
    """
    Configuration for the ``regexp_extract`` function.

    These options can be configured via environment variables
    with the prefix ``REGEXP_UDF__``.

    Parameters
    ----------
    pattern_cache_size
        Number of compiled patterns kept by each function object, so
        that batches sharing a pattern compile it once. ``0`` disables
        the cache. 128 by default.

        This can be set using the ``REGEXP_UDF__PATTERN_CACHE_SIZE``
        environment variable.
    log_traces
        Whether to log a structured trace record for every call.
        ``False`` by default.

        This can be set using the ``REGEXP_UDF__LOG_TRACES``
        environment variable.
    """

    _env_prefix = "REGEXP_UDF"

    pattern_cache_size: int = dataclasses.field(
        default_factory=_make_default_factory(
            f"{_env_prefix}__PATTERN_CACHE_SIZE", int, default=128
        )
    )
    log_traces: bool = dataclasses.field(
        default_factory=_make_default_factory(
            f"{_env_prefix}__LOG_TRACES", _bool_converter, default=False
        )
    )

    def __post_init__(self) -> None:  # noqa: D105
        if isinstance(self.pattern_cache_size, bool) or not isinstance(
            self.pattern_cache_size, int
        ):
            raise TypeError("pattern_cache_size must be an int")
        if self.pattern_cache_size < 0:
            raise ValueError("pattern_cache_size must be non-negative")
        if not isinstance(self.log_traces, bool):
            raise TypeError("log_traces must be a bool")

    @classmethod
    def from_kwargs(cls, **kwargs: Any) -> Self:
        """
        Create a :class:`ConfigOptions` from user provided keyword arguments.

        Options not given are taken from the environment.

        Raises
        ------
        TypeError
            For unknown options, or options of the wrong type.
        """
        valid_options = {field.name for field in dataclasses.fields(cls)}
        extra_options = set(kwargs) - valid_options
        if extra_options:
            raise TypeError(f"Unsupported options: {extra_options}")
        return cls(**kwargs)
