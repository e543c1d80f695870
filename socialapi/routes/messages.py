"""
Social API: Message Route Handlers
====================================

What:  Create, list, fetch, edit and delete messages.
How:   Each handler makes one MessageService call (plus an author lookup for
       POST), then maps the Result to the status code of its endpoint.

Endpoint Inventory:
    POST   /messages                        200 created | 400 any failure
    GET    /messages                        200 list | 500 storage failure
    GET    /messages/{message_id}           200 message | 200 empty body otherwise
    DELETE /messages/{message_id}           200 deleted message | 200 empty body otherwise
    PATCH  /messages/{message_id}           200 updated | 400 any failure
    GET    /accounts/{account_id}/messages  200 list | 400 any failure

Non-integer path ids are rejected with 400 by the RequestValidationError
handler in main.py before these handlers run.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from socialapi.dependencies import get_account_service, get_message_service
from socialapi.routes.responses import empty_response, failure_response
from socialapi.schemas.common import ErrorResponse
from socialapi.schemas.message import Message
from socialapi.services.account_service import AccountService
from socialapi.services.message_service import MessageService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Messages"])

EMPTY_BODY = {"description": "Message absent (empty body)"}


@router.post(
    "/messages",
    response_model=Message,
    responses={400: {"description": "Invalid message or author", "model": ErrorResponse}},
    summary="Post a new message",
)
async def create_message(
    message: Message,
    accounts: AccountService = Depends(get_account_service),
    messages: MessageService = Depends(get_message_service),
):
    author = await accounts.get_by_id(message.posted_by)
    if not author.ok:
        return failure_response(author, 400)

    result = await messages.create_message(message, author.value)
    if not result.ok:
        return failure_response(result, 400)
    return result.value


@router.get(
    "/messages",
    response_model=List[Message],
    responses={500: {"description": "Storage failure", "model": ErrorResponse}},
    summary="List all messages",
)
async def list_messages(messages: MessageService = Depends(get_message_service)):
    result = await messages.get_all()
    if not result.ok:
        return failure_response(result, 500)
    return result.value


@router.get(
    "/messages/{message_id}",
    response_model=Message,
    responses={400: {"description": "message_id is not an integer", "model": ErrorResponse}},
    summary="Fetch one message",
)
async def get_message(
    message_id: int,
    messages: MessageService = Depends(get_message_service),
):
    """
    Return the message, or 200 with an empty body when it does not exist.

    A storage failure is also answered with an empty 200.
    """
    result = await messages.get_by_id(message_id)
    if not result.ok:
        if result.failure.cause is not None:
            logger.error("Fetching message %s failed: %r", message_id, result.failure.cause)
        return empty_response()
    return result.value


@router.delete(
    "/messages/{message_id}",
    response_model=Message,
    responses={200: EMPTY_BODY},
    summary="Delete one message",
)
async def delete_message(
    message_id: int,
    messages: MessageService = Depends(get_message_service),
):
    """
    Delete the message and return it as it was.

    Deleting an absent message is not an error: the response is 200 with an
    empty body, as it is when the store fails.
    """
    found = await messages.get_by_id(message_id)
    if not found.ok:
        if found.failure.cause is not None:
            logger.error("Fetching message %s for delete failed: %r", message_id, found.failure.cause)
        return empty_response()

    deleted = await messages.delete_message(found.value)
    if not deleted.ok:
        if deleted.failure.cause is not None:
            logger.error("Deleting message %s failed: %r", message_id, deleted.failure.cause)
        return empty_response()
    return found.value


@router.patch(
    "/messages/{message_id}",
    response_model=Message,
    responses={400: {"description": "Invalid text or unknown message", "model": ErrorResponse}},
    summary="Edit the text of a message",
)
async def update_message(
    message_id: int,
    message: Message,
    messages: MessageService = Depends(get_message_service),
):
    result = await messages.update_message(message.model_copy(update={"id": message_id}))
    if not result.ok:
        return failure_response(result, 400)
    return result.value


@router.get(
    "/accounts/{account_id}/messages",
    response_model=List[Message],
    responses={400: {"description": "Lookup failed", "model": ErrorResponse}},
    summary="List the messages posted by one account",
)
async def list_account_messages(
    account_id: int,
    messages: MessageService = Depends(get_message_service),
):
    result = await messages.get_by_account_id(account_id)
    if not result.ok:
        return failure_response(result, 400)
    return result.value
