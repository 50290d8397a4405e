"""
Pytest configuration and fixtures for pyrefscale test suite.

This file contains shared fixtures, test configuration, and utilities
used across the test suite.
"""
import os
import sys
import pytest
import numpy as np


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    for marker in ("unit", "integration", "importtest", "slow"):
        config.addinivalue_line("markers", marker)


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers and ordering."""
    for item in items:
        # Mark import tests for easy selection
        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


@pytest.fixture(scope="session")
def sequential_raster():
    """4x4 float32 raster holding 0..15 in row-major order."""
    return np.arange(16, dtype=np.float32).reshape(4, 4)


@pytest.fixture(scope="session")
def block_raster():
    """2x2 uint8 raster used for nearest neighbour replication."""
    return np.array([[10, 20], [30, 40]], dtype=np.uint8)


@pytest.fixture
def random_raster():
    """Provide a small random float32 raster for quick tests."""
    rng = np.random.default_rng(42)
    return (rng.random((6, 8)) * 100.0).astype(np.float32)


class TestDataManager:
    """Helper class for managing test data."""

    @staticmethod
    def create_gradient(nx=12, ny=9, dtype=np.float32):
        """Raster where each value is x + 10 * y."""
        y, x = np.mgrid[0:ny, 0:nx]
        return (x + 10 * y).astype(dtype)

    @staticmethod
    def create_batch(channels=3, nx=6, ny=4, dtype=np.uint8):
        """(channels, ny, nx) raster whose channels differ by a constant offset."""
        base = np.arange(nx * ny).reshape(ny, nx)
        return np.stack([base + 50 * c for c in range(channels)]).astype(dtype)


@pytest.fixture
def test_data_manager():
    """Provide access to test data creation utilities."""
    return TestDataManager()
