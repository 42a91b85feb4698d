"""
handlers/account_handler.py
---------------------------
Routes for /users, including applying to a job.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from handlers.deps import get_account_repo
from repositories.account_repo import AccountRepository
from schemas import validate
from schemas.account import AccountNew, AccountUpdate
from security.auth import ensure_admin, ensure_correct_user_or_admin
from security.tokens import create_token

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", status_code=201, dependencies=[Depends(ensure_admin)])
def create_account(
    payload: dict[str, Any] = Body(...),
    repo: AccountRepository = Depends(get_account_repo),
) -> dict:
    """
    Admin-only account creation; the new account may itself be an admin.

    Returns { user, token }.
    """
    data = validate(AccountNew, payload)
    account = repo.create(data)
    return {"user": account, "token": create_token(account)}


@router.get("", dependencies=[Depends(ensure_admin)])
def list_accounts(repo: AccountRepository = Depends(get_account_repo)) -> dict:
    return {"users": repo.find_all()}


@router.get("/{username}", dependencies=[Depends(ensure_correct_user_or_admin)])
def get_account(username: str, repo: AccountRepository = Depends(get_account_repo)) -> dict:
    """GET => { user } with user.jobs = [ postingId, ... ]"""
    return {"user": repo.get(username)}


@router.patch("/{username}", dependencies=[Depends(ensure_correct_user_or_admin)])
def update_account(
    username: str,
    payload: dict[str, Any] = Body(...),
    repo: AccountRepository = Depends(get_account_repo),
) -> dict:
    """PATCH { firstName, lastName, password, email } => { user }"""
    data = validate(AccountUpdate, payload)
    return {"user": repo.update(username, data)}


@router.delete("/{username}", dependencies=[Depends(ensure_correct_user_or_admin)])
def delete_account(username: str, repo: AccountRepository = Depends(get_account_repo)) -> dict:
    repo.remove(username)
    return {"deleted": username}


@router.post(
    "/{username}/jobs/{posting_id}",
    status_code=201,
    dependencies=[Depends(ensure_correct_user_or_admin)],
)
def apply_to_job(
    username: str,
    posting_id: int,
    repo: AccountRepository = Depends(get_account_repo),
) -> dict:
    repo.apply_to_job(username, posting_id)
    return {"applied": posting_id}
