from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tests._fixtures.harness_builder import HarnessBuilder


@pytest.fixture
def harness(tmp_path: Path) -> HarnessBuilder:
    """Provide a reusable harness builder rooted at the pytest tmp_path."""
    return HarnessBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_samplecheck_logger():
    """Undo configure_logging() so caplog sees records from every test."""
    yield
    logger = logging.getLogger("samplecheck")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
