"""Repositories package."""

from directory_api.repositories.company_repository import CompanyRepository
from directory_api.repositories.representative_repository import RepresentativeRepository

__all__ = ["CompanyRepository", "RepresentativeRepository"]
