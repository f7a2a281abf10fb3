#!/usr/bin/env python3
"""
Configuration management for the GymScout web application.
"""

from functools import lru_cache
from pathlib import Path

from core.config_loader import AppConfig, load_config


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent


@lru_cache()
def get_config() -> AppConfig:
    """
    Get application configuration with caching.

    Loads config.yaml from the project root (defaults if absent) and applies
    environment variable overrides. Result is cached for performance.

    Returns:
        AppConfig: The application configuration.
    """
    return load_config(str(get_project_root() / 'config.yaml'))
