"""
Social API: Account Entity
============================

What:  The Account record exchanged between repositories, services and clients.
How:   A Pydantic model used both as the request body of /register and /login
       and as the response body. Built from AccountRow via from_attributes.

Wire shape:
    {"id": 1, "username": "ann", "password": "pw12"}

`account_id` is accepted as an input alias for `id`. An id of 0 means the
account has not been persisted yet.
"""

from pydantic import AliasChoices, BaseModel, Field


class Account(BaseModel):
    id: int = Field(
        default=0,
        validation_alias=AliasChoices("id", "account_id"),
        description="Server-assigned identifier (0 when unset)",
    )
    username: str = Field(default="", description="Unique login name")
    password: str = Field(default="", description="Plain-text password, at least 4 characters")

    model_config = {"from_attributes": True, "populate_by_name": True}
