"""Companies API router - CRUD plus representative assignment and transfer."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from directory_api.routers.dependencies import get_company_directory
from directory_api.schemas.company import Company, CompanyCreate
from directory_api.schemas.representative import Representative
from directory_api.services.company_directory import CompanyDirectory

router = APIRouter(prefix="/companies", tags=["companies"])


@router.post(
    "",
    response_model=Company,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new company",
    description="Creates a new company with the provided details.",
)
def create_company(
    payload: CompanyCreate,
    directory: CompanyDirectory = Depends(get_company_directory),
) -> Company:
    return directory.create(payload)


# Static paths are declared before /{company_id} so they win the match.


@router.get(
    "/name/{name}",
    response_model=list[Company],
    summary="Get companies by name",
    description="Retrieves companies matching the specified name.",
)
def find_companies_by_name(
    name: str,
    directory: CompanyDirectory = Depends(get_company_directory),
) -> list[Company]:
    return directory.find_by_name(name)


@router.get(
    "/no-representative",
    response_model=list[Company],
    summary="Get companies without representatives",
    description="Retrieves companies that do not have any representatives assigned.",
)
def find_companies_without_representatives(
    directory: CompanyDirectory = Depends(get_company_directory),
) -> list[Company]:
    return directory.find_without_representatives()


@router.get(
    "/all",
    response_model=list[Company],
    summary="Get all companies",
    description="Retrieves all existing companies.",
)
def list_companies(
    directory: CompanyDirectory = Depends(get_company_directory),
) -> list[Company]:
    return directory.list_all()


@router.get(
    "/representative/{representative_id}",
    response_model=list[Company],
    summary="Get companies of a representative",
    description="Retrieves every company the representative is currently assigned to.",
)
def find_companies_by_representative(
    representative_id: int,
    directory: CompanyDirectory = Depends(get_company_directory),
) -> list[Company]:
    return directory.find_by_representative(representative_id)


@router.post(
    "/transfer/representative/",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Transfer a representative to another company",
    description="Transfers a representative from their current company to another company.",
)
def transfer_representative(
    current_company_id: int = Query(alias="currentCompanyId"),
    new_company_id: int = Query(alias="newCompanyId"),
    representative_id: int = Query(alias="representativeId"),
    directory: CompanyDirectory = Depends(get_company_directory),
) -> Response:
    """
    Raises:
        NotFoundError (404): If either company or the representative is missing.
        InvalidStateError (500): If the representative is not in the current company.
    """
    directory.transfer_representative(current_company_id, new_company_id, representative_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{company_id}",
    response_model=Company,
    summary="Get a company by ID",
    description="Retrieves a company using its unique identifier.",
)
def get_company(
    company_id: int,
    directory: CompanyDirectory = Depends(get_company_directory),
) -> Company:
    return directory.get_by_id(company_id)


@router.put(
    "/{company_id}",
    response_model=Company,
    summary="Update a company",
    description=(
        "Updates the name of an existing company. When `representatives` is "
        "supplied it replaces the assigned set."
    ),
)
def update_company(
    company_id: int,
    payload: CompanyCreate,
    directory: CompanyDirectory = Depends(get_company_directory),
) -> Company:
    return directory.update(company_id, payload)


@router.delete(
    "/{company_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a company",
    description="Deletes a company using its unique identifier.",
)
def delete_company(
    company_id: int,
    directory: CompanyDirectory = Depends(get_company_directory),
) -> Response:
    directory.delete(company_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{company_id}/representatives/{representative_id}/assign",
    response_model=Company,
    summary="Assign a representative to a company",
    description="Assigns an existing representative to an existing company.",
)
def assign_representative(
    company_id: int,
    representative_id: int,
    directory: CompanyDirectory = Depends(get_company_directory),
) -> Company:
    return directory.assign_representative(company_id, representative_id)


@router.post(
    "/{company_id}/representatives/{representative_id}/unassign",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Unassign a representative from a company",
    description="Removes a representative from a company.",
)
def unassign_representative(
    company_id: int,
    representative_id: int,
    directory: CompanyDirectory = Depends(get_company_directory),
) -> Response:
    directory.unassign_representative(company_id, representative_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{company_id}/representatives",
    response_model=list[Representative],
    summary="Get all representatives for a company",
    description="Retrieves all representatives associated with a specific company.",
)
def list_company_representatives(
    company_id: int,
    directory: CompanyDirectory = Depends(get_company_directory),
) -> list[Representative]:
    return directory.list_representatives(company_id)
