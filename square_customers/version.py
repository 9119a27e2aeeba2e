"""
Version information for the Square Customers client.

Single source of truth: pyproject.toml
Runtime access via importlib.metadata with fallback.
"""

from __future__ import annotations

import sys
from importlib.metadata import PackageNotFoundError, version

# Fallback version if package metadata unavailable (dev mode)
_FALLBACK_VERSION = "0.1.0"

DISTRIBUTION_NAME = "square-customers-client"


def get_version() -> str:
    """Get the package version from metadata or fallback."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return _FALLBACK_VERSION


VERSION = get_version()


def version_string() -> str:
    """
    Get formatted version string for display.

    Returns:
        Formatted version string like "v0.1.0 (python 3.12.1)"
    """
    python_version = f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"
    return f"v{VERSION} (python {python_version})"


__all__ = [
    "VERSION",
    "get_version",
    "version_string",
]
