import logging

import pytest

from tierprice import Settings, create_app, default_catalog
from tierprice.pricing import DiscountResolver

TIERPRICE_ENV = ("TIERPRICE_EXTRA_TIERS", "TIERPRICE_QUANTUM", "TIERPRICE_LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in TIERPRICE_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def catalog():
    return default_catalog()


@pytest.fixture
def resolver(catalog):
    return DiscountResolver(catalog)


@pytest.fixture
def app():
    return create_app(Settings())


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("tierprice")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
