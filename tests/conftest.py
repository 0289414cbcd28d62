"""Pytest configuration for raytracer tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session, and a recording
test shape for checking the world/object space plumbing in Shape.
"""

import pytest
import taichi as ti

from src.whitted.core.tuples import vector
from src.whitted.geometry.shape import Shape


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls which can cause
    segmentation faults due to Taichi runtime conflicts.
    """
    ti.init(arch=ti.cpu, random_seed=42)
    yield


class RecordingShape(Shape):
    """Shape that records the object-space rays it receives.

    Intersections are never produced; the local normal is the object-space
    point read as a vector, so transforms are visible in ``normal_at``.
    """

    def __init__(self, recorder, **kwargs):
        super().__init__(**kwargs)
        self.recorder = recorder

    def local_intersect(self, ray):
        self.recorder.append(ray)
        return []

    def local_normal_at(self, point):
        return vector(point.x, point.y, point.z)


@pytest.fixture
def recorder():
    """List that collects the rays passed to a RecordingShape."""
    return []


@pytest.fixture
def make_test_shape(recorder):
    """Factory for RecordingShape instances sharing the test's recorder."""

    def _make(**kwargs):
        return RecordingShape(recorder, **kwargs)

    return _make
