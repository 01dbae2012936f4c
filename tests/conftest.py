from __future__ import annotations

import logging

import pytest

from vec3py import Vector3
from vec3py.logging import vec3py_logger


@pytest.fixture
def v() -> Vector3:
    return Vector3(1, 2, 3)


@pytest.fixture
def w() -> Vector3:
    return Vector3(-4, 5, 0.5)


@pytest.fixture(autouse=True)
def restore_logger_level():
    level = vec3py_logger.level
    yield
    vec3py_logger.setLevel(level)
    logging.captureWarnings(False)
