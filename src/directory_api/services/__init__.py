"""Services package."""

from directory_api.services.company_directory import CompanyDirectory
from directory_api.services.representative_directory import RepresentativeDirectory

__all__ = ["CompanyDirectory", "RepresentativeDirectory"]
