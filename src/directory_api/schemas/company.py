"""Company Pydantic schemas."""

from pydantic import BaseModel, ConfigDict

from directory_api.schemas.fields import CAMEL_CONFIG, CompanyName
from directory_api.schemas.representative import Representative, RepresentativeReference


class CompanyBase(BaseModel):
    """Base company schema with common fields."""

    model_config = CAMEL_CONFIG

    name: CompanyName


class CompanyCreate(CompanyBase):
    """
    Schema for creating or updating a company.

    ``representatives`` left out (or null) means "no change" on update and
    "empty" on create.
    """

    representatives: list[RepresentativeReference] | None = None


class Company(CompanyBase):
    """Complete company schema with database fields."""

    model_config = ConfigDict(**CAMEL_CONFIG, from_attributes=True)

    id: int
    representatives: list[Representative] = []
