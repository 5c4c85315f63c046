"""Game ORM: generic metadata shared by every kind of game.

Invariants:
    - id is an autoincrement integer, reused as primary key by private_games
    - status holds a GameStatus value; only "active" is produced by the private game service

Design Decisions:
    - private_game is a one-to-one facet; ON DELETE CASCADE on its FK removes it with the game
    - Deleting the private facet leaves the game row in place (kept as history)
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.domain_types import GameStatus
from app.db.base import Base


class Game(Base):
    """Game record, one row per hosted game session."""
    __tablename__ = "games"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=GameStatus.ACTIVE.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    private_game: Mapped["PrivateGame"] = relationship(
        "PrivateGame", back_populates="game", uselist=False,
        cascade="all",
        passive_deletes=True,
    )
