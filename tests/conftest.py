from __future__ import annotations

from loguru import logger
import pytest


@pytest.fixture(autouse=True)
def silence_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield
    logger.remove()
    logger.disable("cldpy")
