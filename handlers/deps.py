"""
handlers/deps.py
----------------
Builds repositories and services around the app's Database handle.
Tests swap these out through `app.dependency_overrides`.
"""

from fastapi import Depends, Request

from db.connection import Database
from repositories.account_repo import AccountRepository
from repositories.organization_repo import OrganizationRepository
from repositories.posting_repo import PostingRepository
from services.auth_service import AuthService


def get_db(request: Request) -> Database:
    return request.app.state.db


def get_organization_repo(db: Database = Depends(get_db)) -> OrganizationRepository:
    return OrganizationRepository(db)


def get_posting_repo(db: Database = Depends(get_db)) -> PostingRepository:
    return PostingRepository(db)


def get_account_repo(db: Database = Depends(get_db)) -> AccountRepository:
    return AccountRepository(db)


def get_auth_service(accounts: AccountRepository = Depends(get_account_repo)) -> AuthService:
    return AuthService(accounts)
