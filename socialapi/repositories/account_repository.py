"""
Social API: Account Repository
================================

What:  SQLAlchemy implementation of AccountRepositoryBase over the `account` table.
Who:   Built per request by socialapi.dependencies; used by AccountService.

Statements:
    get_by_id            SELECT ... WHERE account_id = :id
    get_all              SELECT ... FROM account
    find_by_username     SELECT ... WHERE username = :username
    username_exists      SELECT account_id ... WHERE username = :username LIMIT 1
    find_by_credentials  SELECT ... WHERE username = :username AND password = :password
    insert               INSERT INTO account (username, password)
    update               UPDATE account SET password = :password WHERE account_id = :id
    delete               DELETE FROM account WHERE account_id = :id
"""

from typing import List, Optional

from sqlalchemy import delete, select, update

from socialapi.models.account import AccountRow
from socialapi.repositories.base import AccountRepositoryBase
from socialapi.repositories.sql import SessionRepository
from socialapi.schemas.account import Account


class AccountRepository(SessionRepository, AccountRepositoryBase):

    async def get_by_id(self, entity_id: int) -> Optional[Account]:
        async with self.storage_errors("retrieving the account", account_id=entity_id):
            result = await self.session.execute(
                select(AccountRow).where(AccountRow.id == entity_id)
            )
            row = result.scalar_one_or_none()
        return Account.model_validate(row) if row else None

    async def get_all(self) -> List[Account]:
        async with self.storage_errors("retrieving all accounts"):
            result = await self.session.execute(select(AccountRow).order_by(AccountRow.id))
            rows = result.scalars().all()
        return [Account.model_validate(row) for row in rows]

    async def find_by_username(self, username: str) -> Optional[Account]:
        async with self.storage_errors("finding an account by username", username=username):
            result = await self.session.execute(
                select(AccountRow).where(AccountRow.username == username)
            )
            row = result.scalar_one_or_none()
        return Account.model_validate(row) if row else None

    async def username_exists(self, username: str) -> bool:
        async with self.storage_errors("checking username existence", username=username):
            result = await self.session.execute(
                select(AccountRow.id).where(AccountRow.username == username).limit(1)
            )
            found = result.scalar_one_or_none()
        return found is not None

    async def find_by_credentials(self, username: str, password: str) -> Optional[Account]:
        async with self.storage_errors("validating login", username=username):
            result = await self.session.execute(
                select(AccountRow).where(
                    AccountRow.username == username,
                    AccountRow.password == password,
                )
            )
            row = result.scalar_one_or_none()
        return Account.model_validate(row) if row else None

    async def insert(self, entity: Account) -> Account:
        row = AccountRow(username=entity.username, password=entity.password)
        async with self.storage_errors("inserting an account", username=entity.username):
            self.session.add(row)
            # flush emits the INSERT and populates the generated account_id
            await self.session.flush()
        return Account.model_validate(row)

    async def update(self, entity: Account) -> bool:
        async with self.storage_errors("updating the account", account_id=entity.id):
            result = await self.session.execute(
                update(AccountRow)
                .where(AccountRow.id == entity.id)
                .values(password=entity.password)
            )
        return result.rowcount > 0

    async def delete(self, entity: Account) -> bool:
        async with self.storage_errors("deleting the account", account_id=entity.id):
            result = await self.session.execute(
                delete(AccountRow).where(AccountRow.id == entity.id)
            )
        return result.rowcount > 0
