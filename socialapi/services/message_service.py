"""
Social API: Message Service
=============================

What:  Business rules for messages: posting, listing, editing, deleting.
How:   Wraps a MessageRepositoryBase supplied at construction. Every method
       returns a Result; nothing is retried and a single StorageError aborts
       the operation as a SERVICE_FAILURE.
Who:   Called by the /messages and /accounts/{account_id}/messages handlers.

Rules:
    - message_text is non-empty after trimming and at most 254 characters
    - a new message must name an existing author, and that author's id must
      equal message.posted_by
    - update_message changes only message_text and does not re-check the
      author (callers are trusted to hold the right message)
"""

import logging
from typing import List, Optional

from socialapi.exceptions import StorageError
from socialapi.repositories.base import MessageRepositoryBase
from socialapi.results import Result
from socialapi.schemas.account import Account
from socialapi.schemas.message import Message

logger = logging.getLogger(__name__)

MESSAGE_MAX_LENGTH = 254
DB_ACCESS_ERROR_MSG = "Error accessing the database"


class MessageService:

    def __init__(self, messages: MessageRepositoryBase):
        self.messages = messages

    async def get_by_id(self, message_id: int) -> Result[Message]:
        logger.info("Fetching message with ID: %s", message_id)
        try:
            message = await self.messages.get_by_id(message_id)
        except StorageError as e:
            return Result.service_failure(DB_ACCESS_ERROR_MSG, e)
        if message is None:
            return Result.not_found("Message not found")
        return Result.success(message)

    async def get_all(self) -> Result[List[Message]]:
        logger.info("Fetching all messages")
        try:
            messages = await self.messages.get_all()
        except StorageError as e:
            return Result.service_failure(DB_ACCESS_ERROR_MSG, e)
        logger.info("Fetched %d messages", len(messages))
        return Result.success(messages)

    async def get_by_account_id(self, account_id: int) -> Result[List[Message]]:
        logger.info("Fetching messages posted by account ID: %s", account_id)
        try:
            messages = await self.messages.get_by_posted_by(account_id)
        except StorageError as e:
            return Result.service_failure(DB_ACCESS_ERROR_MSG, e)
        logger.info("Fetched %d messages", len(messages))
        return Result.success(messages)

    async def create_message(
        self, message: Message, author: Optional[Account]
    ) -> Result[Message]:
        """
        Post a new message as `author`.

        Args:
            message: Incoming message; its id is ignored
            author:  The account posting it, or None if no such account exists

        Returns:
            The stored message with its assigned id, or INVALID_REQUEST when
            the author is missing, the text is invalid, or the author is not
            the account named in posted_by.
        """
        logger.info("Creating message for account %s", message.posted_by)

        if author is None:
            return Result.invalid("Account must exist when posting a new message")

        problem = self._validate_text(message.message_text)
        if problem:
            return Result.invalid(problem)

        if author.id != message.posted_by:
            return Result.invalid("Account not authorized to modify this message")

        try:
            created = await self.messages.insert(message)
        except StorageError as e:
            return Result.service_failure(DB_ACCESS_ERROR_MSG, e)
        logger.info("Created message with ID: %s", created.id)
        return Result.success(created)

    async def update_message(self, message: Message) -> Result[Message]:
        """
        Replace the text of the stored message with `message.message_text`.

        Only message.id and message.message_text are read from the argument.
        """
        logger.info("Updating message: %s", message.id)

        existing = await self.get_by_id(message.id)
        if not existing.ok:
            return existing

        updated = existing.value.model_copy(update={"message_text": message.message_text})
        problem = self._validate_text(updated.message_text)
        if problem:
            return Result.invalid(problem)

        try:
            persisted = await self.messages.update(updated)
        except StorageError as e:
            return Result.service_failure(DB_ACCESS_ERROR_MSG, e)
        if not persisted:
            # Deleted between the read and the update
            return Result.not_found("Message not found")
        logger.info("Updated message: %s", updated.id)
        return Result.success(updated)

    async def delete_message(self, message: Message) -> Result[None]:
        logger.info("Deleting message: %s", message.id)
        try:
            deleted = await self.messages.delete(message)
        except StorageError as e:
            return Result.service_failure(DB_ACCESS_ERROR_MSG, e)
        if not deleted:
            return Result.not_found("Message to delete not found")
        logger.info("Deleted message %s", message.id)
        return Result.success()

    @staticmethod
    def _validate_text(text: Optional[str]) -> Optional[str]:
        if text is None or not text.strip():
            return "Message text cannot be null or empty"
        if len(text) > MESSAGE_MAX_LENGTH:
            return f"Message text cannot exceed {MESSAGE_MAX_LENGTH} characters"
        return None
