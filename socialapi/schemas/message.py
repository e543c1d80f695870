"""
Social API: Message Entity
============================

What:  The Message record exchanged between repositories, services and clients.
How:   A Pydantic model used as the request body of POST/PATCH /messages and
       as the response body of every message endpoint.

Wire shape:
    {"id": 1, "posted_by": 1, "message_text": "hello", "time_posted_epoch": 1000}

`message_id` is accepted as an input alias for `id`. For PATCH only
`message_text` is read; the other fields may be omitted.
"""

from typing import Optional

from pydantic import AliasChoices, BaseModel, Field


class Message(BaseModel):
    id: int = Field(
        default=0,
        validation_alias=AliasChoices("id", "message_id"),
        description="Server-assigned identifier (0 when unset)",
    )
    posted_by: int = Field(default=0, description="Account id of the author")
    message_text: Optional[str] = Field(
        default=None,
        description="Message body, 1 to 254 characters",
    )
    time_posted_epoch: int = Field(
        default=0,
        description="Caller-supplied posting time (epoch seconds)",
    )

    model_config = {"from_attributes": True, "populate_by_name": True}
