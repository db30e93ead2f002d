"""Representative database model."""

from sqlalchemy import Column, Integer, String

from directory_api.database import Base


class Representative(Base):
    """
    Representative model for personnel that companies can be assigned.

    Attributes:
        id: Primary key
        first_name: First name (max 255 characters)
        last_name: Last name (max 255 characters)
    """

    __tablename__ = "representatives"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)

    def __repr__(self) -> str:
        """String representation of Representative."""
        return (
            f"<Representative(id={self.id}, first_name='{self.first_name}', "
            f"last_name='{self.last_name}')>"
        )
