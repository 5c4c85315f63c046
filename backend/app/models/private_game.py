"""PrivateGame ORM: password-protected facet of a Game.

Invariants:
    - id is both primary key and foreign key to games.id (shared primary key)
    - current_players starts at 0; 0 <= current_players <= max_players is intended
    - passwd is stored in plain text and never listed publicly
"""

from sqlalchemy import String, Integer, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class PrivateGame(Base):
    """Private game: join secret, session link and capacity."""
    __tablename__ = "private_games"
    __table_args__ = (
        CheckConstraint("max_players >= 0", name="ck_private_games_max_players"),
        CheckConstraint("current_players >= 0", name="ck_private_games_current_players"),
    )

    id: Mapped[int] = mapped_column(
        Integer, ForeignKey("games.id", ondelete="CASCADE"), primary_key=True,
    )
    passwd: Mapped[str] = mapped_column(String(255), nullable=False)
    link: Mapped[str] = mapped_column(String(500), nullable=False)
    max_players: Mapped[int] = mapped_column(Integer, nullable=False)
    current_players: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )

    game: Mapped["Game"] = relationship("Game", back_populates="private_game")
