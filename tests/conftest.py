import logging

import pytest

from models.cart import Cart
from utils.logger import LOGGER_NAME


@pytest.fixture
def cart() -> Cart:
    return Cart()


@pytest.fixture
def electronics_cart() -> Cart:
    c = Cart()
    c.add_item("Laptop", 999.99, 1)
    c.add_item("Mouse", 29.99, 2)
    return c


@pytest.fixture
def clean_logger():
    # setup_logger() configures a process-wide logger; detach what a test added.
    logger = logging.getLogger(LOGGER_NAME)
    before = list(logger.handlers)
    level = logger.level
    yield logger
    for h in logger.handlers:
        if h not in before:
            h.close()
    logger.handlers = before
    logger.setLevel(level)
