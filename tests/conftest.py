"""Shared fixtures for concavehull tests."""

import pytest

from concavehull import Point

# 24 points around a hollow interior
SAMPLE_CLOUD = [
    (141.0, 408.0),
    (160.0, 400.0),
    (177.0, 430.0),
    (151.0, 442.0),
    (155.0, 425.0),
    (134.0, 430.0),
    (126.0, 447.0),
    (139.0, 466.0),
    (160.0, 471.0),
    (167.0, 447.0),
    (182.0, 466.0),
    (192.0, 442.0),
    (187.0, 413.0),
    (173.0, 403.0),
    (165.0, 430.0),
    (171.0, 430.0),
    (177.0, 437.0),
    (175.0, 443.0),
    (172.0, 444.0),
    (163.0, 448.0),
    (156.0, 447.0),
    (153.0, 438.0),
    (154.0, 431.0),
    (160.0, 428.0),
]


@pytest.fixture
def sample_cloud() -> list[Point]:
    """The sample cloud as Points."""
    return [Point(x, y) for x, y in SAMPLE_CLOUD]
