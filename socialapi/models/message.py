"""
Social API: Message SQLAlchemy Model
======================================

What:  ORM mapping of the `message` table.
Who:   Used by MessageRepository; converted to the Message entity on the way out.

Table Design:
    - message_id: integer primary key, assigned by the store on insert
    - posted_by: account id of the author. No foreign key; MessageService
      checks the author exists before inserting.
    - message_text: up to 254 characters (enforced by MessageService)
    - time_posted_epoch: caller-supplied epoch timestamp, not server-generated

Index on posted_by:
    Serves GET /accounts/{account_id}/messages.
"""

from sqlalchemy import BigInteger, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from socialapi.database import Base


class MessageRow(Base):
    __tablename__ = "message"

    id: Mapped[int] = mapped_column(
        "message_id",
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    posted_by: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
    )

    message_text: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    time_posted_epoch: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
    )

    __table_args__ = (
        Index("idx_message_posted_by", "posted_by"),
    )

    def __repr__(self) -> str:
        return (
            f"<MessageRow(id={self.id}, posted_by={self.posted_by}, "
            f"time_posted_epoch={self.time_posted_epoch})>"
        )
