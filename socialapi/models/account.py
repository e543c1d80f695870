"""
Social API: Account SQLAlchemy Model
======================================

What:  ORM mapping of the `account` table.
How:   Inherits from the shared DeclarativeBase; Alembic reads this for migrations.
Who:   Used by AccountRepository; converted to the Account entity on the way out.

Table Design:
    - account_id: integer primary key, assigned by the store on insert
    - username: UNIQUE, so two concurrent registrations of the same name
      cannot both commit
    - password: plain text, compared literally at login
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from socialapi.database import Base


class AccountRow(Base):
    """
    A registered account.

    Query Patterns:
        - Login: SELECT ... WHERE username = :u AND password = :p
        - Registration check: SELECT 1 ... WHERE username = :u
          → both use the unique index on username
    """

    __tablename__ = "account"

    # The Python attribute is `id` so the row validates straight into the
    # Account entity; the column keeps its table-qualified name.
    id: Mapped[int] = mapped_column(
        "account_id",
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    username: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
    )

    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    def __repr__(self) -> str:
        # password omitted
        return f"<AccountRow(id={self.id}, username='{self.username}')>"
