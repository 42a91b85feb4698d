"""
handlers/organization_handler.py
--------------------------------
Routes for /companies.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request

from handlers.deps import get_organization_repo
from models.filters import OrganizationFilters
from repositories.organization_repo import OrganizationRepository
from schemas import validate
from schemas.organization import OrganizationNew, OrganizationSearch, OrganizationUpdate
from security.auth import ensure_admin

router = APIRouter(prefix="/companies", tags=["companies"])


@router.post("", status_code=201, dependencies=[Depends(ensure_admin)])
def create_organization(
    payload: dict[str, Any] = Body(...),
    repo: OrganizationRepository = Depends(get_organization_repo),
) -> dict:
    """POST { handle, name, description, numEmployees, logoUrl } => { company }"""
    data = validate(OrganizationNew, payload)
    return {"company": repo.create(data)}


@router.get("")
def list_organizations(
    request: Request,
    repo: OrganizationRepository = Depends(get_organization_repo),
) -> dict:
    """
    GET => { companies: [ { handle, name, description, numEmployees, logoUrl }, ... ] }

    Query filters: minEmployees, maxEmployees, nameLike.
    """
    query = validate(OrganizationSearch, request.query_params)
    return {"companies": repo.find_all(OrganizationFilters.from_query(query))}


@router.get("/{handle}")
def get_organization(
    handle: str,
    repo: OrganizationRepository = Depends(get_organization_repo),
) -> dict:
    """GET => { company } with company.jobs = [ { id, title, salary, equity }, ... ]"""
    return {"company": repo.get(handle)}


@router.patch("/{handle}", dependencies=[Depends(ensure_admin)])
def update_organization(
    handle: str,
    payload: dict[str, Any] = Body(...),
    repo: OrganizationRepository = Depends(get_organization_repo),
) -> dict:
    """PATCH { name, description, numEmployees, logoUrl } => { company }"""
    data = validate(OrganizationUpdate, payload)
    return {"company": repo.update(handle, data)}


@router.delete("/{handle}", dependencies=[Depends(ensure_admin)])
def delete_organization(
    handle: str,
    repo: OrganizationRepository = Depends(get_organization_repo),
) -> dict:
    repo.remove(handle)
    return {"deleted": handle}
