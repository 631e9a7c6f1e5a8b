"""
Company Routes

GET /companies - List all companies
POST /addCompany - Create a company (name must be unique)
GET /company/{name} - Get company by name
PUT /updateCompany/{name} - Update company (token required)
DELETE /deleteCompany/{name} - Remove company (token required)

/companies and /addCompany are public. The update/delete routes opt into
authenticate_token.
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Depends
from pymongo.errors import DuplicateKeyError, PyMongoError

from placement_portal.core.auth import authenticate_token
from placement_portal.models import CompanyDocument
from placement_portal.services.mongo_service import CompanyService, get_company_service
from placement_portal.schemas.schemas import (
    CompanyCreate, CompanyUpdate, CompanyDataResponse, CompanyListResponse, MessageResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Companies"])

COMPANY_EXISTS = "Company already exists"
COMPANY_NOT_FOUND = "COMPANY NOT FOUND"


def store_failure(exc: PyMongoError) -> HTTPException:
    """500 carrying the store's own message."""
    logger.exception("Company store operation failed")
    return HTTPException(status_code=500, detail=str(exc))


@router.get("/companies", response_model=CompanyListResponse)
def list_companies(service: CompanyService = Depends(get_company_service)):
    """List every company, unfiltered and unpaginated."""
    try:
        return {"data": service.list_all()}
    except PyMongoError as e:
        raise store_failure(e)


@router.post("/addCompany", response_model=CompanyDataResponse, status_code=201)
def add_company(
    data: Optional[CompanyCreate] = None,
    service: CompanyService = Depends(get_company_service)
):
    """
    Create a company.

    Name uniqueness is checked before the insert; a concurrent duplicate that
    slips past the check is caught by the unique index and reported the same way.
    """
    if data is None or not data.name or not data.name.strip():
        raise HTTPException(status_code=400, detail="Name is required")

    company = CompanyDocument.model_validate(data.model_dump(by_alias=True, exclude_none=True))

    try:
        if service.get_by_name(company.name):
            raise HTTPException(status_code=409, detail=COMPANY_EXISTS)
        saved = service.insert(company)
    except DuplicateKeyError:
        raise HTTPException(status_code=409, detail=COMPANY_EXISTS)
    except PyMongoError as e:
        raise store_failure(e)

    logger.info("Company created: %s", saved["name"])
    return {"data": saved}


@router.get("/company/{name}", response_model=CompanyDataResponse)
def get_company(name: str, service: CompanyService = Depends(get_company_service)):
    """Get a single company by name."""
    try:
        company = service.get_by_name(name)
    except PyMongoError as e:
        raise store_failure(e)

    if not company:
        raise HTTPException(status_code=404, detail=COMPANY_NOT_FOUND)
    return {"data": company}


@router.put("/updateCompany/{name}", response_model=CompanyDataResponse)
def update_company(
    name: str,
    data: CompanyUpdate,
    claims: dict = Depends(authenticate_token),
    service: CompanyService = Depends(get_company_service)
):
    """Update a company's fields. Renaming onto an existing name is a conflict."""
    # null clears a field; name cannot be cleared
    changes = data.model_dump(by_alias=True, exclude_unset=True)
    if not changes:
        raise HTTPException(status_code=400, detail="No fields to update")
    if "name" in changes and (changes["name"] is None or not changes["name"].strip()):
        raise HTTPException(status_code=400, detail="Name is required")
    for field in ("positions", "eligibilityCriteria"):
        if field in changes and changes[field] is None:
            changes[field] = []

    try:
        if not service.get_by_name(name):
            raise HTTPException(status_code=404, detail=COMPANY_NOT_FOUND)

        new_name = changes.get("name")
        if new_name and new_name != name and service.get_by_name(new_name):
            raise HTTPException(status_code=409, detail=COMPANY_EXISTS)

        updated = service.update(name, changes)
    except DuplicateKeyError:
        raise HTTPException(status_code=409, detail=COMPANY_EXISTS)
    except PyMongoError as e:
        raise store_failure(e)

    # Deleted between the lookup and the update
    if updated is None:
        raise HTTPException(status_code=404, detail=COMPANY_NOT_FOUND)

    logger.info("Company updated: %s (by %s)", updated["name"], claims.get("email") or claims.get("id"))
    return {"data": updated}


@router.delete("/deleteCompany/{name}", response_model=MessageResponse)
def delete_company(
    name: str,
    claims: dict = Depends(authenticate_token),
    service: CompanyService = Depends(get_company_service)
):
    """Remove a company by name."""
    try:
        removed = service.delete(name)
    except PyMongoError as e:
        raise store_failure(e)

    if not removed:
        raise HTTPException(status_code=404, detail=COMPANY_NOT_FOUND)

    logger.info("Company removed: %s (by %s)", name, claims.get("email") or claims.get("id"))
    return MessageResponse(message="Company removed successfully")
