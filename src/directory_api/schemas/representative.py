"""Representative Pydantic schemas."""

from pydantic import BaseModel, ConfigDict

from directory_api.schemas.fields import CAMEL_CONFIG, FirstName, LastName


class RepresentativeBase(BaseModel):
    """Base representative schema with common fields."""

    model_config = CAMEL_CONFIG

    first_name: FirstName
    last_name: LastName


class RepresentativeCreate(RepresentativeBase):
    """Schema for creating or fully updating a representative."""

    pass


class Representative(RepresentativeBase):
    """Complete representative schema with database fields."""

    model_config = ConfigDict(**CAMEL_CONFIG, from_attributes=True)

    id: int


class RepresentativeReference(BaseModel):
    """
    Reference to an existing representative inside a company payload.

    Only ``id`` is used; the names are accepted so a full representative
    object can be echoed back, but they are never written.
    """

    model_config = CAMEL_CONFIG

    id: int
    first_name: str | None = None
    last_name: str | None = None
