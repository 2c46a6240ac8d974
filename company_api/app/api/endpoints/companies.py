"""
Company endpoints.

These routes expose a CRUD API over the company records.  Each handler
is a thin pass-through to :class:`CompanyService` that maps its
results onto status codes:

* ``GET /companies`` – 200 with the full list.
* ``GET /companies/{id}`` – 200, or 404 when the id is unknown.
* ``POST /companies`` – 201 with the created record, 400 without a name.
* ``PUT /companies/{id}`` – 200 with the renamed record, 400 without a
  name, 404 when the id is unknown.
* ``DELETE /companies/{id}`` – 204 with an empty body, or 404.

Store failures surface as 500 through the handlers in ``core.errors``.
"""

from typing import Any, Dict, List, Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Response, status

from company_api.app.api.deps import get_company_service
from company_api.app.schemas.company import (
    CompanyCreate,
    CompanyRead,
    CompanyUpdate,
    ErrorResponse,
)
from company_api.app.services.company_service import CompanyService

router = APIRouter()

NOT_FOUND = "Company not found"
NAME_REQUIRED = "Name is required"

_not_found = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
_bad_request = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


def _require_name(payload: Optional[Union[CompanyCreate, CompanyUpdate]]) -> str:
    if payload is None or not payload.name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=NAME_REQUIRED)
    return payload.name


@router.get("", response_model=List[CompanyRead], response_model_exclude_unset=True)
async def list_companies(
    service: CompanyService = Depends(get_company_service),
) -> List[Dict[str, Any]]:
    """Return every company in storage order."""
    return service.get_all()


@router.get(
    "/{company_id}",
    response_model=CompanyRead,
    response_model_exclude_unset=True,
    responses=_not_found,
)
async def get_company(
    company_id: str,
    service: CompanyService = Depends(get_company_service),
) -> Dict[str, Any]:
    """Retrieve a single company by ID.

    Returns HTTP 404 if the company does not exist.
    """
    company = service.get_by_id(company_id)
    if company is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return company


@router.post(
    "",
    response_model=CompanyRead,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
    responses=_bad_request,
)
async def create_company(
    payload: Optional[CompanyCreate] = None,
    service: CompanyService = Depends(get_company_service),
) -> Dict[str, Any]:
    """Create a new company."""
    name = _require_name(payload)
    return service.create(name)


@router.put(
    "/{company_id}",
    response_model=CompanyRead,
    response_model_exclude_unset=True,
    responses={**_bad_request, **_not_found},
)
async def update_company(
    company_id: str,
    payload: Optional[CompanyUpdate] = None,
    service: CompanyService = Depends(get_company_service),
) -> Dict[str, Any]:
    """Rename an existing company."""
    name = _require_name(payload)
    company = service.update(company_id, name)
    if company is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return company


@router.delete(
    "/{company_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_not_found,
)
async def delete_company(
    company_id: str,
    service: CompanyService = Depends(get_company_service),
) -> Response:
    """Delete a company."""
    if not service.delete(company_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
