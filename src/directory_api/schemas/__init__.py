"""Pydantic schemas package."""

from directory_api.schemas.company import Company, CompanyBase, CompanyCreate
from directory_api.schemas.error import ErrorResponse
from directory_api.schemas.representative import (
    Representative,
    RepresentativeBase,
    RepresentativeCreate,
    RepresentativeReference,
)

__all__ = [
    "Company",
    "CompanyBase",
    "CompanyCreate",
    "ErrorResponse",
    "Representative",
    "RepresentativeBase",
    "RepresentativeCreate",
    "RepresentativeReference",
]
