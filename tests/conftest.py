"""Shared pytest fixtures for the trace_lib test suite.

Fixtures:
    fake_clock: Manually advanced clock for timing-dependent sessions
    line_guide: Sparse 400-unit horizontal guide at y=100
    square_guide: Sparse closed square guide, 200 units a side
    three_dots: Three well separated dot targets
    service: ExerciseService on the built-in catalog with a fake clock

Markers:
    slow: Mark test as slow-running (skip with -m "not slow")
"""

import sys
from pathlib import Path

import pytest

# Add project root to path so tests run without installing the package
sys.path.insert(0, str(Path(__file__).parent.parent))

from trace_lib.api.services import ExerciseService  # noqa: E402


class FakeClock:
    """Callable clock returning seconds; advance() moves it forward."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# -----------------------------------------------------------------------------
# Pytest Markers
# -----------------------------------------------------------------------------

def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow-running (deselect with '-m \"not slow\"')"
    )


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def fake_clock():
    """Return a FakeClock starting at t=0."""
    return FakeClock()


@pytest.fixture
def line_guide():
    """Horizontal guide from (0, 100) to (400, 100).

    Expands at step 4 to 101 dense points at every multiple of 4 on x.
    """
    return [(0, 100), (400, 100)]


@pytest.fixture
def square_guide():
    """Closed square from (100, 100) to (300, 300)."""
    return [(100, 100), (300, 100), (300, 300), (100, 300), (100, 100)]


@pytest.fixture
def three_dots():
    """Three dots far enough apart that every tap has a single candidate."""
    return [(50, 50), (250, 50), (250, 250)]


@pytest.fixture
def service(fake_clock):
    """ExerciseService with the built-in guides and a fake clock."""
    return ExerciseService(clock=fake_clock)
