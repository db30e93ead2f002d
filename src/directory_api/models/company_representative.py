"""Company/representative association table."""

from sqlalchemy import Column, ForeignKey, Integer, Table

from directory_api.database import Base

# Composite primary key gives set semantics: a representative appears at most
# once per company. Nothing stops the same representative appearing under
# several companies.
company_representatives = Table(
    "company_representatives",
    Base.metadata,
    Column(
        "company_id",
        Integer,
        ForeignKey("companies.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "representative_id",
        Integer,
        ForeignKey("representatives.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
)
