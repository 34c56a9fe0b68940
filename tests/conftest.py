import logging
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


@pytest.fixture
def data_dir():
    return DATA_DIR


@pytest.fixture(autouse=True)
def _reset_fuzzytip_logger():
    yield
    logger = logging.getLogger("fuzzytip")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
