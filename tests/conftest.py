# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# FIXTURES:
# ---------
# - isolated_config (autouse)
#     Clears ORDERED_ATTRS_* variables, the cached config and the
#     package logger's handlers around every test.
#
# - serializer
#     A fresh InputOrderSerializer.
#
# - creators / subjects
#     Sample multi-valued attribute values.
#
# - work_class
#     Host record whose "store" reverses creators on write,
#     with creators ordered and subjects left alone.
#
# ==============================================

import logging

import pytest

from ordered_attrs import InputOrderSerializer, ordered
from ordered_attrs.config import reset_config

ENV_VARS = (
    "ORDERED_ATTRS_LOG_LEVEL",
    "ORDERED_ATTRS_LOG_FORMAT",
    "ORDERED_ATTRS_SERIALIZER",
)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    for name in ENV_VARS:
        # setenv first so teardown also removes anything a .env file loaded
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    reset_config()

    yield

    reset_config()
    logger = logging.getLogger("ordered_attrs")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def serializer():
    return InputOrderSerializer()


@pytest.fixture
def creators():
    return ["Clotho", "Lachesis", "Atropos"]


@pytest.fixture
def subjects():
    return ["Mythology", "Antiquity", "Doom"]


@pytest.fixture
def work_class():
    @ordered("creators")
    class Work:
        def __init__(self):
            self._creators = []
            self.subjects = []

        @property
        def creators(self):
            return self._creators

        @creators.setter
        def creators(self, values):
            # "Persist" in an arbitrarily different order than given
            self._creators = list(reversed(list(values)))

    return Work
