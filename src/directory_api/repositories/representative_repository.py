"""Representative persistence."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from directory_api.models.representative import Representative


class RepresentativeRepository:
    """
    Data access for Representative records.

    Writes are staged and flushed, never committed; the caller owns the
    transaction.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_id(self, representative_id: int) -> Representative | None:
        return self.db.get(Representative, representative_id)

    def find_all(self) -> list[Representative]:
        return list(self.db.scalars(select(Representative).order_by(Representative.id)))

    def find_all_by_first_name_and_last_name(
        self, first_name: str, last_name: str
    ) -> list[Representative]:
        """Exact match on both name fields."""
        stmt = (
            select(Representative)
            .where(
                Representative.first_name == first_name,
                Representative.last_name == last_name,
            )
            .order_by(Representative.id)
        )
        return list(self.db.scalars(stmt))

    def save(self, representative: Representative) -> Representative:
        self.db.add(representative)
        self.db.flush()  # Assigns the ID for new records
        return representative

    def delete_by_id(self, representative_id: int) -> None:
        """Delete by identifier; a missing identifier is a no-op."""
        self.db.execute(
            delete(Representative)
            .where(Representative.id == representative_id)
            .execution_options(synchronize_session="fetch")
        )
