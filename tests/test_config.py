# SPDX-FileCopyrightText: Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from regexp_udf.utils.config import ConfigOptions


def test_defaults() -> None:
    config = ConfigOptions()
    assert config.pattern_cache_size == 128
    assert config.log_traces is False


def test_config_option_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    with monkeypatch.context() as m:
        m.setenv("REGEXP_UDF__PATTERN_CACHE_SIZE", "7")
        m.setenv("REGEXP_UDF__LOG_TRACES", "yes")
        config = ConfigOptions()
        assert config.pattern_cache_size == 7
        assert config.log_traces is True


def test_explicit_overrides_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REGEXP_UDF__PATTERN_CACHE_SIZE", "7")
    assert ConfigOptions(pattern_cache_size=3).pattern_cache_size == 3


def test_invalid_bool_from_env_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REGEXP_UDF__LOG_TRACES", "maybe")
    with pytest.raises(ValueError, match="Invalid boolean value"):
        ConfigOptions()


@pytest.mark.parametrize(
    "options",
    [
        {"pattern_cache_size": "8"},
        {"pattern_cache_size": 1.5},
        {"pattern_cache_size": True},
        {"log_traces": 1},
    ],
)
def test_validate_types(options) -> None:
    with pytest.raises(TypeError):
        ConfigOptions(**options)


def test_validate_negative_cache_size() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        ConfigOptions(pattern_cache_size=-1)


def test_from_kwargs() -> None:
    config = ConfigOptions.from_kwargs(log_traces=True)
    assert config.log_traces is True
    assert config.pattern_cache_size == 128


def test_from_kwargs_unknown_key_raises() -> None:
    with pytest.raises(TypeError, match="Unsupported options"):
        ConfigOptions.from_kwargs(unknown_key=True)


def test_hashable() -> None:
    assert hash(ConfigOptions()) == hash(ConfigOptions())
    assert ConfigOptions() == ConfigOptions()
