"""Request-scoped service construction."""

from fastapi import Depends
from sqlalchemy.orm import Session

from directory_api.database import get_db
from directory_api.services.company_directory import CompanyDirectory
from directory_api.services.representative_directory import RepresentativeDirectory


def get_representative_directory(db: Session = Depends(get_db)) -> RepresentativeDirectory:
    return RepresentativeDirectory(db)


def get_company_directory(db: Session = Depends(get_db)) -> CompanyDirectory:
    return CompanyDirectory(db)
