"""
Role based authorization checks.

Operations declare the minimum role they require. A caller passes the gate
when one of its granted roles meets or exceeds that requirement.
"""

from functools import lru_cache
from typing import Dict, Iterable, List, Optional

USER = "USER"
ADMIN = "ADMIN"

ROLE_PREFIX = "ROLE_"


class RoleHierarchy:
    """Manages role hierarchy and inheritance"""

    # Each role maps to the roles that satisfy it
    DEFAULT_HIERARCHY = {
        ADMIN: [ADMIN],
        USER: [USER, ADMIN],
    }

    def __init__(self, hierarchy: Optional[Dict[str, List[str]]] = None):
        self.hierarchy = hierarchy or self.DEFAULT_HIERARCHY

    @lru_cache(maxsize=128)
    def get_allowed_roles(self, role: str) -> List[str]:
        """Get all roles that meet or exceed the given role"""
        return self.hierarchy.get(role, [])

    def has_role_permission(self, user_role: str, required_role: str) -> bool:
        """Check if user_role has permission for required_role"""
        return user_role in self.get_allowed_roles(required_role)


role_hierarchy = RoleHierarchy()


def normalize_role(role: str) -> str:
    role = role.strip().upper()
    if role.startswith(ROLE_PREFIX):
        role = role[len(ROLE_PREFIX):]
    return role


def check_role(granted_roles: Iterable[str], required_role: str) -> bool:
    """Check if any granted role satisfies the required role"""
    required_role = normalize_role(required_role)
    return any(
        role_hierarchy.has_role_permission(normalize_role(role), required_role)
        for role in granted_roles
    )
