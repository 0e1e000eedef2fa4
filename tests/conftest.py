import matplotlib
matplotlib.use("Agg")

import pytest

import logger


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.set_stopwatch(None)


class FakeClock:
    """Deterministic clock; each call advances by `step` seconds."""

    def __init__(self, step=0.001):
        self.now = 0.0
        self.step = step

    def __call__(self):
        self.now += self.step
        return self.now


@pytest.fixture
def fake_clock():
    return FakeClock()
