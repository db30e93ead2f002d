"""Database models package."""

from directory_api.models.company import Company
from directory_api.models.company_representative import company_representatives
from directory_api.models.representative import Representative

__all__ = ["Company", "Representative", "company_representatives"]
