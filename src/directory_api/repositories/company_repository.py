"""Company persistence and association queries."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from directory_api.models.company import Company
from directory_api.models.company_representative import company_representatives


class CompanyRepository:
    """
    Data access for Company records and the company/representative
    association.

    Writes are staged and flushed, never committed; the caller owns the
    transaction.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_id(self, company_id: int) -> Company | None:
        return self.db.get(Company, company_id)

    def find_all(self) -> list[Company]:
        return list(self.db.scalars(select(Company).order_by(Company.id)))

    def find_all_by_name(self, name: str) -> list[Company]:
        stmt = select(Company).where(Company.name == name).order_by(Company.id)
        return list(self.db.scalars(stmt))

    def find_all_without_representatives(self) -> list[Company]:
        stmt = select(Company).where(~Company.representatives.any()).order_by(Company.id)
        return list(self.db.scalars(stmt))

    def find_all_by_representative_id(self, representative_id: int) -> list[Company]:
        stmt = (
            select(Company)
            .join(company_representatives, company_representatives.c.company_id == Company.id)
            .where(company_representatives.c.representative_id == representative_id)
            .order_by(Company.id)
        )
        return list(self.db.scalars(stmt))

    def save(self, company: Company) -> Company:
        self.db.add(company)
        self.db.flush()
        return company

    def save_all(self, companies: Iterable[Company]) -> list[Company]:
        """Stage several companies and flush them together."""
        companies = list(companies)
        self.db.add_all(companies)
        self.db.flush()
        return companies

    def delete_by_id(self, company_id: int) -> None:
        """Delete by identifier; association rows go with it, a missing
        identifier is a no-op."""
        company = self.find_by_id(company_id)
        if company is not None:
            self.db.delete(company)
            self.db.flush()

    def disassociate_representative_from_all_companies(self, representative_id: int) -> int:
        """
        Strip a representative from every company's set in one statement.

        Args:
            representative_id: ID of the representative to strip

        Returns:
            Number of association rows removed
        """
        result = self.db.execute(
            delete(company_representatives).where(
                company_representatives.c.representative_id == representative_id
            )
        )
        # Loaded companies may still hold the removed member in memory
        self.db.expire_all()
        return result.rowcount
