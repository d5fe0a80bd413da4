"""
Authorization for the UCSB backend.

Main components:
- core: role hierarchy and the pure role check
- principal: the authenticated caller and its roles
- auth: token based caller resolution and the route level role gate
"""

from .core import (
    USER,
    ADMIN,
    RoleHierarchy,
    role_hierarchy,
    check_role,
    normalize_role,
)

from .principal import Principal

__all__ = [
    'USER',
    'ADMIN',
    'RoleHierarchy',
    'role_hierarchy',
    'check_role',
    'normalize_role',
    'Principal',
]
