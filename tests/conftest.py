"""Pytest configuration and shared fixtures for qpmodels tests.

This module provides:
- A deterministic numpy RNG fixture
- A fixture that routes package log records into a buffer
"""

import io
import os

import numpy as np
import pytest

from qpmodels.logging import configure_logging


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function")
def log_stream():
    """Capture qpmodels log output; the package logger does not propagate to root."""
    stream = io.StringIO()
    configure_logging(level="DEBUG", stream=stream)
    yield stream
    configure_logging()
