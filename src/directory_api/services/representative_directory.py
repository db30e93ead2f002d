"""Representative lifecycle service."""

from __future__ import annotations

from sqlalchemy.orm import Session

from directory_api.database import transaction
from directory_api.models.representative import Representative
from directory_api.repositories.company_repository import CompanyRepository
from directory_api.repositories.representative_repository import RepresentativeRepository
from directory_api.schemas.representative import Representative as RepresentativeSchema
from directory_api.schemas.representative import RepresentativeCreate
from directory_api.utils.exceptions import NotFoundError
from directory_api.utils.logger import get_logger
from directory_api.utils.mapping import representative_to_schema, representatives_to_schemas

logger = get_logger(__name__)


class RepresentativeDirectory:
    """
    Service owning the lifecycle of representative records.

    Has no view of company membership except for ``delete``, which strips the
    representative from every company before removing the record.
    """

    def __init__(
        self,
        db: Session,
        repository: RepresentativeRepository | None = None,
        companies: CompanyRepository | None = None,
    ) -> None:
        """
        Initialize the directory.

        Args:
            db: SQLAlchemy database session
            repository: Representative repository (built from ``db`` if omitted)
            companies: Company repository used for bulk disassociation
        """
        self.db = db
        self.repository = repository or RepresentativeRepository(db)
        self.companies = companies or CompanyRepository(db)

    def resolve(self, representative_id: int) -> Representative:
        """
        Load a representative record or fail.

        Args:
            representative_id: ID of the representative

        Returns:
            The stored Representative record

        Raises:
            NotFoundError: If no representative has this ID
        """
        representative = self.repository.find_by_id(representative_id)
        if representative is None:
            logger.warning("Representative %s not found", representative_id)
            raise NotFoundError(f"Representative not found with id: {representative_id}")
        return representative

    def create(self, data: RepresentativeCreate) -> RepresentativeSchema:
        """
        Persist a new representative.

        Args:
            data: Validated first and last name

        Returns:
            The stored representative including its new ID
        """
        with transaction(self.db):
            representative = self.repository.save(
                Representative(first_name=data.first_name, last_name=data.last_name)
            )
            result = representative_to_schema(representative)
        logger.info("Created representative %s", result.id)
        return result

    def get_by_id(self, representative_id: int) -> RepresentativeSchema:
        return representative_to_schema(self.resolve(representative_id))

    def find_by_full_name(self, first_name: str, last_name: str) -> list[RepresentativeSchema]:
        """Representatives matching both names exactly (possibly none)."""
        return representatives_to_schemas(
            self.repository.find_all_by_first_name_and_last_name(first_name, last_name)
        )

    def list_all(self) -> list[RepresentativeSchema]:
        return representatives_to_schemas(self.repository.find_all())

    def update(self, representative_id: int, data: RepresentativeCreate) -> RepresentativeSchema:
        """
        Overwrite the names of an existing representative.

        Args:
            representative_id: ID of the representative to update
            data: New first and last name

        Returns:
            The updated representative

        Raises:
            NotFoundError: If no representative has this ID
        """
        with transaction(self.db):
            representative = self.resolve(representative_id)
            representative.first_name = data.first_name
            representative.last_name = data.last_name
            result = representative_to_schema(self.repository.save(representative))
        logger.info("Updated representative %s", representative_id)
        return result

    def delete(self, representative_id: int) -> None:
        """
        Remove a representative after stripping it from every company.

        Existence is not checked first; deleting an unknown ID changes nothing.

        Args:
            representative_id: ID of the representative to delete
        """
        with transaction(self.db):
            removed = self.companies.disassociate_representative_from_all_companies(
                representative_id
            )
            self.repository.delete_by_id(representative_id)
        logger.info(
            "Deleted representative %s (removed from %d companies)", representative_id, removed
        )
