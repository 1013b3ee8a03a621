"""
Provides centralized, immutable constants for the BuildConfig library.

This package exposes singleton instances of constant groups, ensuring they
are validated on import and easily accessible from a single namespace.

Usage:
    from buildconfig import constants

    # Access application metadata
    print(constants.app.VERSION)

    # Access a resource key
    raw = source.get_string(constants.config.defaults.KEY_EXPIRY)
"""

from .app import app
from .config import config
from .logs import logs

__all__ = [
    "app",
    "config",
    "logs",
]
