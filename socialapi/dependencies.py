"""
Social API: Request-Scoped Service Providers
==============================================

What:  FastAPI dependencies that assemble session → repository → service.
How:   Each request gets one AsyncSession from get_db_session; both services
       built for that request share it, so a request commits or rolls back
       as a unit.
Who:   Injected into route handlers with Depends(). Tests replace
       get_db_session (or these providers) through app.dependency_overrides.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from socialapi.database import get_db_session
from socialapi.repositories.account_repository import AccountRepository
from socialapi.repositories.message_repository import MessageRepository
from socialapi.services.account_service import AccountService
from socialapi.services.message_service import MessageService


def get_account_service(db: AsyncSession = Depends(get_db_session)) -> AccountService:
    return AccountService(AccountRepository(db))


def get_message_service(db: AsyncSession = Depends(get_db_session)) -> MessageService:
    return MessageService(MessageRepository(db))
