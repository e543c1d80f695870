"""
Social API: Account Route Handlers
====================================

What:  POST /register and POST /login.
How:   Parses the Account body, delegates to AccountService, maps the Result
       to a status code.

Status codes:
    /register  200 created account | 400 on any failure (blank fields,
               short password, duplicate username, storage fault)
    /login     200 matched account | 401 on mismatch or any failure
"""

import logging

from fastapi import APIRouter, Depends

from socialapi.dependencies import get_account_service
from socialapi.routes.responses import error_response, failure_response
from socialapi.schemas.account import Account
from socialapi.schemas.common import ErrorResponse
from socialapi.services.account_service import AccountService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Accounts"])


@router.post(
    "/register",
    response_model=Account,
    responses={
        200: {"description": "Account created", "model": Account},
        400: {"description": "Invalid or duplicate account", "model": ErrorResponse},
    },
    summary="Register a new account",
)
async def register(
    account: Account,
    accounts: AccountService = Depends(get_account_service),
):
    result = await accounts.create_account(account)
    if not result.ok:
        return failure_response(result, 400)
    return result.value


@router.post(
    "/login",
    response_model=Account,
    responses={
        200: {"description": "Credentials matched", "model": Account},
        401: {"description": "Credentials did not match", "model": ErrorResponse},
    },
    summary="Log in with username and password",
)
async def login(
    account: Account,
    accounts: AccountService = Depends(get_account_service),
):
    """
    Check credentials and return the matching account.

    The comparison is a literal match of username and password.
    """
    result = await accounts.validate_login(account)
    if not result.ok:
        return failure_response(result, 401)
    if result.value is None:
        logger.info("Login rejected for %s", account.username)
        return error_response(401, "unauthorized", "Invalid username or password")
    return result.value
