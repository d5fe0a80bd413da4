"""
UCSB organization repository for direct database access.
"""

from typing import List
from fastapi import Depends
from sqlalchemy.orm import Session

from .base import BaseRepository
from ..database import get_db
from ..model.organization import UCSBOrganization


class UCSBOrganizationRepository(BaseRepository[UCSBOrganization]):
    """Repository for UCSBOrganization entity database operations."""

    id_column = "org_code"
    entity_name = "UCSBOrganizations"
    
    def __init__(self, db: Session):
        super().__init__(db, UCSBOrganization)
    
    def find_active(self) -> List[UCSBOrganization]:
        """
        Find all organizations that are not flagged inactive.
        
        Returns:
            List of active organizations
        """
        return self.find_by(inactive=False)


def get_organization_repository(db: Session = Depends(get_db)) -> UCSBOrganizationRepository:
    return UCSBOrganizationRepository(db)
