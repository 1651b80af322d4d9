from __future__ import annotations

import logging
from collections.abc import Generator

import pytest


@pytest.fixture(autouse=True)
def _propagating_sqlbind_logger() -> Generator[None, None, None]:
    """Keep the ``sqlbind`` logger attached to the root logger so ``caplog`` sees its records."""
    root_logger = logging.getLogger("sqlbind")
    propagate = root_logger.propagate
    root_logger.propagate = True
    yield
    root_logger.propagate = propagate
