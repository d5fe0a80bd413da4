from .base import Base, metadata
from .organization import UCSBOrganization

__all__ = [
    'Base',
    'metadata',
    'UCSBOrganization'
]
