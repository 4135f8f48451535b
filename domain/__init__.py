"""
Domain layer for the Program Progression API.

This package contains pure domain models, exceptions and services that are
independent of infrastructure concerns (database, API, external services).
"""

from domain.models import (
    Block,
    Day,
    Program,
    ProgressMetadata,
    ProgressRecord,
    Week,
)

__all__ = [
    "Block",
    "Day",
    "Program",
    "ProgressMetadata",
    "ProgressRecord",
    "Week",
]
