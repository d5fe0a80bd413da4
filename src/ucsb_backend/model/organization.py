from sqlalchemy import Boolean, Column, String, text

from .base import Base


class UCSBOrganization(Base):
    __tablename__ = 'ucsborganizations'

    org_code = Column(String(255), primary_key=True)
    org_translation_short = Column(String(255), nullable=False)
    org_translation = Column(String(1024), nullable=False)
    inactive = Column(Boolean, nullable=False, server_default=text("false"), default=False)

    def __eq__(self, other):
        if not isinstance(other, UCSBOrganization):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = Base.__hash__

    def __repr__(self):
        return f"UCSBOrganization(org_code={self.org_code!r}, inactive={self.inactive!r})"
