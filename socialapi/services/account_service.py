"""
Social API: Account Service
=============================

What:  Business rules for accounts: registration, login, lookup, update, delete.
How:   Wraps an AccountRepositoryBase supplied at construction. Every method
       returns a Result; StorageError from the repository becomes a
       SERVICE_FAILURE result and validation problems become INVALID_REQUEST.
Who:   Called by the /register and /login handlers, and by the message
       handlers to resolve the author of a new message.

Registration rules:
    - username is non-blank after trimming
    - password is non-blank and at least 4 characters after trimming
    - username is not already taken (checked first, and again by the
      UNIQUE constraint when the insert races another registration)
"""

import logging
from typing import List, Optional

from socialapi.exceptions import DuplicateEntityError, StorageError
from socialapi.repositories.base import AccountRepositoryBase
from socialapi.results import Result
from socialapi.schemas.account import Account

logger = logging.getLogger(__name__)

PASSWORD_MIN_LENGTH = 4
USERNAME_TAKEN = "The username must be unique"


class AccountService:

    def __init__(self, accounts: AccountRepositoryBase):
        self.accounts = accounts

    # ── Reads ─────────────────────────────────────────────────────────────

    async def get_by_id(self, account_id: int) -> Result[Optional[Account]]:
        logger.info("Fetching account with ID: %s", account_id)
        try:
            account = await self.accounts.get_by_id(account_id)
        except StorageError as e:
            return Result.service_failure("Exception occurred while fetching account", e)
        return Result.success(account)

    async def get_all(self) -> Result[List[Account]]:
        logger.info("Fetching all accounts")
        try:
            accounts = await self.accounts.get_all()
        except StorageError as e:
            return Result.service_failure("Exception occurred while fetching accounts", e)
        logger.info("Fetched %d accounts", len(accounts))
        return Result.success(accounts)

    async def find_by_username(self, username: str) -> Result[Optional[Account]]:
        logger.info("Finding account by username: %s", username)
        try:
            account = await self.accounts.find_by_username(username)
        except StorageError as e:
            return Result.service_failure(
                f"Exception occurred while finding account by username {username}", e
            )
        return Result.success(account)

    async def account_exists(self, account_id: int) -> Result[bool]:
        logger.info("Checking account existence with ID: %s", account_id)
        try:
            account = await self.accounts.get_by_id(account_id)
        except StorageError as e:
            return Result.service_failure(
                "Exception occurred while checking account existence", e
            )
        return Result.success(account is not None)

    # ── Login ─────────────────────────────────────────────────────────────

    async def validate_login(self, candidate: Account) -> Result[Optional[Account]]:
        """
        Match username and password against the store.

        Returns a successful Result whose value is the matched account, or
        None when no account has exactly these credentials.
        """
        logger.info("Validating login for %s", candidate.username)
        try:
            account = await self.accounts.find_by_credentials(
                candidate.username, candidate.password
            )
        except StorageError as e:
            return Result.service_failure("Exception occurred while validating login", e)
        logger.info("Login validation result: %s", account is not None)
        return Result.success(account)

    # ── Writes ────────────────────────────────────────────────────────────

    async def create_account(self, candidate: Account) -> Result[Account]:
        """
        Register a new account.

        Nothing is written unless every rule passes. The returned account
        carries the id assigned by the store.
        """
        logger.info("Creating account: %s", candidate.username)

        problem = self._validate_new_account(candidate)
        if problem:
            return Result.invalid(problem)

        try:
            if await self.accounts.username_exists(candidate.username):
                return Result.invalid(USERNAME_TAKEN)
            created = await self.accounts.insert(candidate)
        except DuplicateEntityError:
            logger.info("Username %s taken by a concurrent registration", candidate.username)
            return Result.invalid(USERNAME_TAKEN)
        except StorageError as e:
            return Result.service_failure("Exception occurred while creating account", e)

        logger.info("Created account with ID: %s", created.id)
        return Result.success(created)

    async def update_account(self, account: Account) -> Result[bool]:
        """
        Persist the account's current password.

        The password rules of create_account are not re-applied here.
        """
        logger.info("Updating account: %s", account.id)
        try:
            updated = await self.accounts.update(account)
        except StorageError as e:
            return Result.service_failure("Exception occurred while updating account", e)
        logger.info("Updated account %s. Update successful %s", account.id, updated)
        return Result.success(updated)

    async def delete_account(self, account: Account) -> Result[bool]:
        logger.info("Deleting account: %s", account.id)
        if account.id == 0:
            return Result.invalid("Account ID cannot be unset")
        try:
            deleted = await self.accounts.delete(account)
        except StorageError as e:
            return Result.service_failure("Exception occurred while deleting account", e)
        logger.info("Deleted account %s. Deletion successful %s", account.id, deleted)
        return Result.success(deleted)

    # ── Validation ────────────────────────────────────────────────────────

    @staticmethod
    def _validate_new_account(candidate: Account) -> Optional[str]:
        """Return the first broken registration rule, or None."""
        username = candidate.username.strip()
        password = candidate.password.strip()

        if not username:
            return "Username cannot be blank"
        if not password:
            return "Password cannot be empty"
        if len(password) < PASSWORD_MIN_LENGTH:
            return f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"
        return None
