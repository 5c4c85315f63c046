"""User ORM: player accounts loaded from seed data.

Invariants:
    - id is a UUID supplied by the seed file (no server default)
    - experience defaults to 0 when the source value is not numeric
"""

import uuid
from datetime import date

from sqlalchemy import String, Text, Integer, Date
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    experience: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_connection: Mapped[date | None] = mapped_column(Date, nullable=True)
