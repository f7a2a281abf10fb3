"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "web: marks tests that exercise the HTTP API (deselect with '-m \"not web\"')"
    )


@pytest.fixture(autouse=True)
def reset_weights_service():
    """Restore the global default weights after every test."""
    yield
    from web.backend.services.weights_service import get_weights_service
    get_weights_service().reset()
