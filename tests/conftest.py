"""Shared fixtures: a scripted random source and log capture."""

import logging

import numpy as np
import pytest

from chemview.logger import get_logger, reset_logger


class ScriptedRng:
    """Stand-in for numpy Generator with fixed draws.

    uniform(lo, hi) returns lo + (hi - lo) * fraction, random() returns
    random_value, integers() fills the requested size with byte_value.
    """

    def __init__(self, fraction: float = 0.5, random_value: float = 0.99, byte_value: int = 0xA4):
        self.fraction = fraction
        self.random_value = random_value
        self.byte_value = byte_value

    def uniform(self, low=0.0, high=1.0):
        return low + (high - low) * self.fraction

    def random(self):
        return self.random_value

    def integers(self, low, high=None, size=None):
        return np.full(size, self.byte_value)


class _RecordingHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def fixed_rng():
    return ScriptedRng()


@pytest.fixture
def drifting_rng():
    """Random source that always wins the valve drift draw."""
    return ScriptedRng(random_value=0.0)


@pytest.fixture
def captured_log():
    """Return a function that starts recording a chemview logger.

    The console loggers do not propagate, so caplog never sees them; the
    logger is rebuilt fresh and a recording handler attached instead.
    """
    attached = []

    def capture(name):
        reset_logger(name)
        logger = get_logger(name)
        handler = _RecordingHandler()
        logger.addHandler(handler)
        attached.append((logger, handler))
        return handler.records

    yield capture
    for logger, handler in attached:
        logger.removeHandler(handler)
