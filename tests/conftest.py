import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_loguru():
    yield
    logger.remove()
