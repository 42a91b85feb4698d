"""
handlers/posting_handler.py
---------------------------
Routes for /jobs.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request

from handlers.deps import get_posting_repo
from models.filters import PostingFilters
from repositories.posting_repo import PostingRepository
from schemas import validate
from schemas.posting import PostingNew, PostingSearch, PostingUpdate
from security.auth import ensure_admin

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("", status_code=201, dependencies=[Depends(ensure_admin)])
def create_posting(
    payload: dict[str, Any] = Body(...),
    repo: PostingRepository = Depends(get_posting_repo),
) -> dict:
    """POST { title, salary, equity, companyHandle } => { job }"""
    data = validate(PostingNew, payload)
    return {"job": repo.create(data)}


@router.get("")
def list_postings(
    request: Request,
    repo: PostingRepository = Depends(get_posting_repo),
) -> dict:
    """
    GET => { jobs: [ { id, title, salary, equity, companyHandle, companyName }, ... ] }

    Query filters: minSalary, hasEquity (only "true" filters), titleLike.
    """
    query = validate(PostingSearch, request.query_params)
    return {"jobs": repo.find_all(PostingFilters.from_query(query))}


@router.get("/{posting_id}")
def get_posting(
    posting_id: int,
    repo: PostingRepository = Depends(get_posting_repo),
) -> dict:
    """GET => { job } with job.company = { handle, name, ... }"""
    return {"job": repo.get(posting_id)}


@router.patch("/{posting_id}", dependencies=[Depends(ensure_admin)])
def update_posting(
    posting_id: int,
    payload: dict[str, Any] = Body(...),
    repo: PostingRepository = Depends(get_posting_repo),
) -> dict:
    """PATCH { title, salary, equity } => { job }"""
    data = validate(PostingUpdate, payload)
    return {"job": repo.update(posting_id, data)}


@router.delete("/{posting_id}", dependencies=[Depends(ensure_admin)])
def delete_posting(
    posting_id: int,
    repo: PostingRepository = Depends(get_posting_repo),
) -> dict:
    repo.remove(posting_id)
    return {"deleted": posting_id}
