from typing import List, Optional
from pydantic import BaseModel, Field, field_validator
from ucsb_backend.permissions.core import ADMIN, check_role, normalize_role


class Principal(BaseModel):
    """Authenticated caller and its granted roles"""

    user_id: Optional[str] = None
    roles: List[str] = Field(default_factory=list)

    @field_validator("roles")
    @classmethod
    def normalize_roles(cls, roles: List[str]) -> List[str]:
        return [normalize_role(role) for role in roles]

    @property
    def is_admin(self) -> bool:
        return self.has_role(ADMIN)

    def has_role(self, required_role: str) -> bool:
        """Check if principal has the required role or a higher one"""
        return check_role(self.roles, required_role)
