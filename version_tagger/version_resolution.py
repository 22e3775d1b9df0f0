"""
Version Resolution Module

Pure functions for turning Version file declarations into base tag names.
This module contains no side effects - only version string logic.
"""

from datetime import date
from typing import Optional

from .config import DATE_SENTINEL
from .models import VersionDeclaration


def normalize_content(content: str) -> str:
    """Remove every whitespace character from Version file content."""
    return "".join(content.split())


def is_date_version(declaration: VersionDeclaration) -> bool:
    """Check whether a declaration selects date-based versioning."""
    return normalize_content(declaration.content) == DATE_SENTINEL


def generate_date_version(today: Optional[date] = None) -> str:
    """
    Generate a date-based version string.

    Month and day are rendered without leading zeros, e.g. 2025.10.7.

    Args:
        today: Date to use, defaults to the local system date

    Returns:
        Version string in YYYY.M.D format
    """
    if today is None:
        today = date.today()
    return f"{today.year}.{today.month}.{today.day}"


def get_namespace(location: str) -> str:
    """
    Get the tag namespace for a Version file location.

    Args:
        location: Directory of the Version file relative to the tree root

    Returns:
        Empty string for the root, otherwise the location with one trailing slash
    """
    location = location.strip("/")
    if not location or location == ".":
        return ""
    return f"{location}/"


def resolve_base_version(declaration: VersionDeclaration, today: Optional[date] = None) -> str:
    """
    Calculate the base tag name for a Version file.

    Pure function apart from reading the clock for date versions.
    Non-date content is used verbatim, so "abc" resolves to "vabc".

    Args:
        declaration: The Version file declaration
        today: Date used for date versions, defaults to the local system date

    Returns:
        Namespaced base tag name, e.g. "service1/v1.2.3"
    """
    namespace = get_namespace(declaration.location)

    if is_date_version(declaration):
        return f"{namespace}v{generate_date_version(today)}"

    return f"{namespace}v{normalize_content(declaration.content)}"
