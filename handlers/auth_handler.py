"""
handlers/auth_handler.py
------------------------
Routes for /auth: token login and self-service registration.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from handlers.deps import get_auth_service
from schemas import validate
from schemas.account import AccountAuth, AccountRegister
from services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/token")
def login(
    payload: dict[str, Any] = Body(...),
    auth: AuthService = Depends(get_auth_service),
) -> dict:
    """POST { username, password } => { token }"""
    data = validate(AccountAuth, payload)
    return {"token": auth.login(data["username"], data["password"])}


@router.post("/register", status_code=201)
def register(
    payload: dict[str, Any] = Body(...),
    auth: AuthService = Depends(get_auth_service),
) -> dict:
    """POST { username, password, firstName, lastName, email } => { token }"""
    data = validate(AccountRegister, payload)
    return {"token": auth.register(data)}
