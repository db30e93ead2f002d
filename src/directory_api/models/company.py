"""Company database model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from directory_api.database import Base
from directory_api.models.company_representative import company_representatives
from directory_api.models.representative import Representative


class Company(Base):
    """
    Company model owning its set of representatives.

    The company is the managing side of the association: membership changes
    only through ``add_representative`` and ``remove_representative``.

    Attributes:
        id: Primary key
        name: Company name (not unique)
        representatives: Set of assigned Representative records
    """

    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)

    representatives = relationship(
        Representative,
        secondary=company_representatives,
        collection_class=set,
        lazy="selectin",
    )

    def add_representative(self, representative: Representative) -> bool:
        """
        Add a representative to this company.

        Args:
            representative: Representative to assign

        Returns:
            True if the set changed, False if it was already a member
        """
        if self.has_representative(representative.id):
            return False
        self.representatives.add(representative)
        return True

    def remove_representative(self, representative_id: int) -> bool:
        """
        Remove a representative from this company by identifier.

        Args:
            representative_id: ID of the representative to drop

        Returns:
            True if the set changed, False if it was not a member
        """
        member = next((r for r in self.representatives if r.id == representative_id), None)
        if member is None:
            return False
        self.representatives.discard(member)
        return True

    def has_representative(self, representative_id: int) -> bool:
        """Whether a representative with this identifier is a member."""
        return any(r.id == representative_id for r in self.representatives)

    def __repr__(self) -> str:
        """String representation of Company."""
        return f"<Company(id={self.id}, name='{self.name}')>"
