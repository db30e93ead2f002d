"""Representatives API router - create, fetch, search, update, and delete."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from directory_api.routers.dependencies import get_representative_directory
from directory_api.schemas.representative import Representative, RepresentativeCreate
from directory_api.services.representative_directory import RepresentativeDirectory

router = APIRouter(prefix="/representatives", tags=["representatives"])


@router.post(
    "",
    response_model=Representative,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new representative",
    description="Creates a new representative with the provided details.",
)
def create_representative(
    payload: RepresentativeCreate,
    directory: RepresentativeDirectory = Depends(get_representative_directory),
) -> Representative:
    return directory.create(payload)


# Static paths are declared before /{representative_id} so they win the match.


@router.get(
    "/name",
    response_model=list[Representative],
    summary="Get representatives by first name and last name",
    description="Retrieves representatives using their first name and last name.",
)
def find_representatives_by_name(
    first_name: str = Query(alias="firstName"),
    last_name: str = Query(alias="lastName"),
    directory: RepresentativeDirectory = Depends(get_representative_directory),
) -> list[Representative]:
    return directory.find_by_full_name(first_name, last_name)


@router.get(
    "/all",
    response_model=list[Representative],
    summary="Get all representatives",
    description="Retrieves all existing representatives.",
)
def list_representatives(
    directory: RepresentativeDirectory = Depends(get_representative_directory),
) -> list[Representative]:
    return directory.list_all()


@router.get(
    "/{representative_id}",
    response_model=Representative,
    summary="Get a representative by ID",
    description="Retrieves a representative using its unique identifier.",
)
def get_representative(
    representative_id: int,
    directory: RepresentativeDirectory = Depends(get_representative_directory),
) -> Representative:
    """
    Raises:
        NotFoundError (404): If the representative does not exist.
    """
    return directory.get_by_id(representative_id)


@router.put(
    "/{representative_id}",
    response_model=Representative,
    summary="Update a representative",
    description="Updates the details of an existing representative.",
)
def update_representative(
    representative_id: int,
    payload: RepresentativeCreate,
    directory: RepresentativeDirectory = Depends(get_representative_directory),
) -> Representative:
    return directory.update(representative_id, payload)


@router.delete(
    "/{representative_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a representative",
    description="Removes the representative from every company, then deletes it.",
)
def delete_representative(
    representative_id: int,
    directory: RepresentativeDirectory = Depends(get_representative_directory),
) -> Response:
    directory.delete(representative_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
