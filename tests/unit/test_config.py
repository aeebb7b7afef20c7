from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_uq.config import (
    BatchConfig,
    batch_config,
    get_batch_config,
    reset_batch_config,
    set_batch_config,
)
from pysatl_uq.errors import InvalidArgumentError


def test_defaults() -> None:
    config = get_batch_config()
    assert config.max_workers >= 1
    assert config.min_chunk_size == 2048


def test_set_returns_previous() -> None:
    before = get_batch_config()
    previous = set_batch_config(max_workers=3)
    assert previous == before
    assert get_batch_config().max_workers == 3
    assert get_batch_config().min_chunk_size == before.min_chunk_size


def test_reset() -> None:
    set_batch_config(max_workers=2, min_chunk_size=5)
    reset_batch_config()
    assert get_batch_config() == BatchConfig()


def test_context_manager_restores() -> None:
    before = get_batch_config()
    with batch_config(min_chunk_size=7) as config:
        assert config.min_chunk_size == 7
        assert get_batch_config() is config
    assert get_batch_config() == before


def test_context_manager_restores_on_error() -> None:
    before = get_batch_config()
    with pytest.raises(RuntimeError), batch_config(max_workers=2):
        raise RuntimeError("boom")
    assert get_batch_config() == before


@pytest.mark.parametrize("values", [{"max_workers": 0}, {"min_chunk_size": -1}])
def test_invalid_values(values: dict[str, int]) -> None:
    before = get_batch_config()
    with pytest.raises(InvalidArgumentError):
        set_batch_config(**values)
    assert get_batch_config() == before
