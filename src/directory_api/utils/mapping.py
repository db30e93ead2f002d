"""Entity to schema conversion helpers."""

from collections.abc import Iterable

from directory_api.models.company import Company
from directory_api.models.representative import Representative
from directory_api.schemas.company import Company as CompanySchema
from directory_api.schemas.representative import Representative as RepresentativeSchema


def representative_to_schema(representative: Representative) -> RepresentativeSchema:
    """Convert a Representative record to its API view."""
    return RepresentativeSchema.model_validate(representative)


def representatives_to_schemas(
    representatives: Iterable[Representative],
) -> list[RepresentativeSchema]:
    """
    Convert representative records to API views, ordered by ID.

    Sets have no order of their own, so sorting keeps responses stable.
    """
    return [
        representative_to_schema(r)
        for r in sorted(representatives, key=lambda r: r.id)
    ]


def company_to_schema(company: Company) -> CompanySchema:
    """Convert a Company record, with its representative set, to its API view."""
    return CompanySchema(
        id=company.id,
        name=company.name,
        representatives=representatives_to_schemas(company.representatives),
    )


def companies_to_schemas(companies: Iterable[Company]) -> list[CompanySchema]:
    return [company_to_schema(c) for c in companies]
