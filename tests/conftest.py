# tests/conftest.py -- shared setup for quadsuite tests
import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_quadsuite_logging():
    """Drop handlers attached by ``logger.setup`` so each test starts clean."""
    yield
    root = logging.getLogger("quadsuite")
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)
