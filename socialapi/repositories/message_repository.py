"""
Social API: Message Repository
================================

What:  SQLAlchemy implementation of MessageRepositoryBase over the `message` table.
Who:   Built per request by socialapi.dependencies; used by MessageService.
"""

from typing import List, Optional

from sqlalchemy import delete, select, update

from socialapi.models.message import MessageRow
from socialapi.repositories.base import MessageRepositoryBase
from socialapi.repositories.sql import SessionRepository
from socialapi.schemas.message import Message


class MessageRepository(SessionRepository, MessageRepositoryBase):
    """
    Message persistence.

    Lists are returned in message_id order, which is also posting order for
    rows inserted through this repository.
    """

    async def get_by_id(self, entity_id: int) -> Optional[Message]:
        async with self.storage_errors("retrieving the message", message_id=entity_id):
            result = await self.session.execute(
                select(MessageRow).where(MessageRow.id == entity_id)
            )
            row = result.scalar_one_or_none()
        return Message.model_validate(row) if row else None

    async def get_all(self) -> List[Message]:
        async with self.storage_errors("retrieving all messages"):
            result = await self.session.execute(select(MessageRow).order_by(MessageRow.id))
            rows = result.scalars().all()
        return [Message.model_validate(row) for row in rows]

    async def get_by_posted_by(self, account_id: int) -> List[Message]:
        async with self.storage_errors("retrieving messages by account", account_id=account_id):
            result = await self.session.execute(
                select(MessageRow)
                .where(MessageRow.posted_by == account_id)
                .order_by(MessageRow.id)
            )
            rows = result.scalars().all()
        return [Message.model_validate(row) for row in rows]

    async def insert(self, entity: Message) -> Message:
        row = MessageRow(
            posted_by=entity.posted_by,
            message_text=entity.message_text,
            time_posted_epoch=entity.time_posted_epoch,
        )
        async with self.storage_errors("inserting a message", posted_by=entity.posted_by):
            self.session.add(row)
            await self.session.flush()
        return Message.model_validate(row)

    async def update(self, entity: Message) -> bool:
        async with self.storage_errors("updating the message", message_id=entity.id):
            result = await self.session.execute(
                update(MessageRow)
                .where(MessageRow.id == entity.id)
                .values(
                    posted_by=entity.posted_by,
                    message_text=entity.message_text,
                    time_posted_epoch=entity.time_posted_epoch,
                )
            )
        return result.rowcount > 0

    async def delete(self, entity: Message) -> bool:
        async with self.storage_errors("deleting the message", message_id=entity.id):
            result = await self.session.execute(
                delete(MessageRow).where(MessageRow.id == entity.id)
            )
        return result.rowcount > 0
