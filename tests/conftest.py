from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import pytest

from pysatl_uq.config import reset_batch_config
from pysatl_uq.families.configuration import reset_families_register
from pysatl_uq.logging import disable_logging
from pysatl_uq.random_generator import set_seed

pytest.importorskip("scipy")


@pytest.fixture(autouse=True)
def _fresh_state() -> Generator[None, Any, None]:
    reset_families_register()
    reset_batch_config()
    set_seed(20251019)
    yield
    disable_logging()
    reset_batch_config()


@pytest.fixture
def small_chunks() -> Generator[None, Any, None]:
    """Force multi-threaded dispatch even for small batches."""
    from pysatl_uq.config import batch_config

    with batch_config(max_workers=4, min_chunk_size=3):
        yield
