"""Company lifecycle and representative association service."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.orm import Session

from directory_api.database import transaction
from directory_api.models.company import Company
from directory_api.models.representative import Representative
from directory_api.repositories.company_repository import CompanyRepository
from directory_api.schemas.company import Company as CompanySchema
from directory_api.schemas.company import CompanyCreate
from directory_api.schemas.representative import Representative as RepresentativeSchema
from directory_api.schemas.representative import RepresentativeReference
from directory_api.services.representative_directory import RepresentativeDirectory
from directory_api.utils.exceptions import InvalidStateError, NotFoundError
from directory_api.utils.logger import get_logger
from directory_api.utils.mapping import (
    companies_to_schemas,
    company_to_schema,
    representatives_to_schemas,
)

logger = get_logger(__name__)


class CompanyDirectory:
    """
    Service for companies and the representatives assigned to them.

    Handles:
    - CRUD on company records
    - Assigning and unassigning representatives (company owns the edge)
    - Transferring a representative between two companies in one transaction

    A representative may be assigned to several companies at once; nothing
    here prevents it. ``transfer_representative`` only checks membership of
    the named source company.
    """

    def __init__(
        self,
        db: Session,
        representatives: RepresentativeDirectory | None = None,
        repository: CompanyRepository | None = None,
    ) -> None:
        """
        Initialize the directory.

        Args:
            db: SQLAlchemy database session
            representatives: Directory used to resolve representative IDs
            repository: Company repository (built from ``db`` if omitted)
        """
        self.db = db
        self.repository = repository or CompanyRepository(db)
        self.representatives = representatives or RepresentativeDirectory(
            db, companies=self.repository
        )

    def _find_company(self, company_id: int) -> Company:
        company = self.repository.find_by_id(company_id)
        if company is None:
            logger.warning("Company %s not found", company_id)
            raise NotFoundError(f"Company not found with id {company_id}")
        return company

    def _resolve_references(
        self, references: Iterable[RepresentativeReference]
    ) -> set[Representative]:
        """Turn representative references into stored records (NotFound if any is missing)."""
        return {self.representatives.resolve(ref.id) for ref in references}

    # ------------------------------------------------------------------ CRUD

    def create(self, data: CompanyCreate) -> CompanySchema:
        """
        Persist a new company.

        Args:
            data: Company name and optional initial representative references

        Returns:
            The stored company including its new ID

        Raises:
            NotFoundError: If an initial representative reference does not exist
        """
        with transaction(self.db):
            company = Company(name=data.name)
            if data.representatives:
                company.representatives = self._resolve_references(data.representatives)
            result = company_to_schema(self.repository.save(company))
        logger.info(
            "Created company %s with %d representatives", result.id, len(result.representatives)
        )
        return result

    def get_by_id(self, company_id: int) -> CompanySchema:
        return company_to_schema(self._find_company(company_id))

    def find_by_name(self, name: str) -> list[CompanySchema]:
        """All companies with exactly this name; names are not unique."""
        return companies_to_schemas(self.repository.find_all_by_name(name))

    def find_without_representatives(self) -> list[CompanySchema]:
        return companies_to_schemas(self.repository.find_all_without_representatives())

    def find_by_representative(self, representative_id: int) -> list[CompanySchema]:
        """All companies that currently list this representative."""
        return companies_to_schemas(
            self.repository.find_all_by_representative_id(representative_id)
        )

    def list_all(self) -> list[CompanySchema]:
        return companies_to_schemas(self.repository.find_all())

    def update(self, company_id: int, data: CompanyCreate) -> CompanySchema:
        """
        Overwrite a company's name and, when given, its representative set.

        Args:
            company_id: ID of the company to update
            data: New name; ``representatives`` replaces the set when not None

        Returns:
            The updated company

        Raises:
            NotFoundError: If the company or a referenced representative is missing
        """
        with transaction(self.db):
            company = self._find_company(company_id)
            company.name = data.name
            if data.representatives is not None:
                company.representatives = self._resolve_references(data.representatives)
            result = company_to_schema(self.repository.save(company))
        logger.info("Updated company %s", company_id)
        return result

    def delete(self, company_id: int) -> None:
        """Delete a company; its representatives survive, their association rows do not."""
        with transaction(self.db):
            self.repository.delete_by_id(company_id)
        logger.info("Deleted company %s", company_id)

    # ----------------------------------------------------------- Association

    def assign_representative(self, company_id: int, representative_id: int) -> CompanySchema:
        """
        Assign a representative to a company.

        Idempotent: assigning an existing member changes nothing. Membership
        in other companies is not checked.

        Args:
            company_id: ID of the company
            representative_id: ID of the representative to assign

        Returns:
            The updated company

        Raises:
            NotFoundError: If the company or representative does not exist
        """
        with transaction(self.db):
            company = self._find_company(company_id)
            representative = self.representatives.resolve(representative_id)
            added = company.add_representative(representative)
            result = company_to_schema(self.repository.save(company))
        if added:
            logger.info("Assigned representative %s to company %s", representative_id, company_id)
        return result

    def unassign_representative(self, company_id: int, representative_id: int) -> None:
        """
        Remove a representative from a company.

        The representative must exist, but need not be a member; when it is
        not, nothing is saved.

        Args:
            company_id: ID of the company
            representative_id: ID of the representative to remove

        Raises:
            NotFoundError: If the company or representative does not exist
        """
        with transaction(self.db):
            company = self._find_company(company_id)
            representative = self.representatives.resolve(representative_id)
            if not company.remove_representative(representative.id):
                return
            self.repository.save(company)
        logger.info(
            "Unassigned representative %s from company %s", representative_id, company_id
        )

    def list_representatives(self, company_id: int) -> list[RepresentativeSchema]:
        return representatives_to_schemas(self._find_company(company_id).representatives)

    def transfer_representative(
        self, source_company_id: int, destination_company_id: int, representative_id: int
    ) -> None:
        """
        Move a representative from one company to another.

        Both companies are saved in the same transaction, so the removal and
        the addition commit together or not at all.

        Args:
            source_company_id: ID of the company the representative leaves
            destination_company_id: ID of the company the representative joins
            representative_id: ID of the representative to move

        Raises:
            NotFoundError: If either company or the representative does not exist
            InvalidStateError: If the representative is not in the source company
        """
        with transaction(self.db):
            source = self._find_company(source_company_id)
            destination = self._find_company(destination_company_id)
            representative = self.representatives.resolve(representative_id)

            if not source.has_representative(representative.id):
                raise InvalidStateError("Representative not part of current company")

            source.remove_representative(representative.id)
            destination.add_representative(representative)
            self.repository.save_all([source, destination])
        logger.info(
            "Transferred representative %s from company %s to company %s",
            representative_id,
            source_company_id,
            destination_company_id,
        )
