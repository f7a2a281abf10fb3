#!/usr/bin/env python3
"""
Test suite for the GymScout compatibility engine.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Skip the HTTP API tests
    python -m pytest tests/ -v -m "not web"

Shared profile builders live in tests/fixtures/profile_fixtures.py.
"""
