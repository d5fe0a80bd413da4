"""
Repository pattern implementation for direct database access.

This package provides the persistence port consumed by the API handlers
and the command line tools.
"""

from .base import (
    BaseRepository,
    RepositoryError,
    NotFoundError,
    DuplicateError
)
from .organization import UCSBOrganizationRepository, get_organization_repository

__all__ = [
    "BaseRepository",
    "RepositoryError", 
    "NotFoundError",
    "DuplicateError",
    "UCSBOrganizationRepository",
    "get_organization_repository"
]
