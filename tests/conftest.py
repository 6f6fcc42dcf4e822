"""Pytest configuration for raytracer tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls which can cause
    segmentation faults due to Taichi runtime conflicts.
    """
    from mirrortrace.core.parallel import init_backend

    init_backend()
    yield


@pytest.fixture
def reference_scene():
    """A fresh full-size reference scene."""
    from mirrortrace.scene.reference import create_reference_scene

    return create_reference_scene()


@pytest.fixture
def small_scene():
    """A fresh reference scene at a reduced 32x24 resolution."""
    from mirrortrace.scene.reference import ReferenceSceneParams, create_reference_scene

    return create_reference_scene(ReferenceSceneParams(width=32, height=24))


@pytest.fixture
def matte():
    """A non-reflective white material."""
    from mirrortrace.core.color import Color
    from mirrortrace.materials.material import Material

    return Material(color=Color(255, 255, 255), albedo=1.0, reflectivity=0.0)
