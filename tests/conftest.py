# tests/conftest.py
import logging
import pytest

from contentconv.normalizers import get_default_normalizer


@pytest.fixture
def normalizer():
    return get_default_normalizer()


# --- Loggers for setup_logging tests, handlers removed afterwards ---
@pytest.fixture
def fresh_logger(request):
    logger = logging.getLogger(f"contentconv.test.{request.node.name}")
    yield logger
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def package_logger():
    logger = logging.getLogger("contentconv")
    saved_handlers, saved_level = logger.handlers[:], logger.level
    logger.handlers.clear()
    try:
        yield logger
    finally:
        logger.handlers[:] = saved_handlers
        logger.setLevel(saved_level)
