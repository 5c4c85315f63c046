"""UserAchievement ORM: link between a user and an achievement.

Invariants:
    - (user_id, achievement_id) is the composite primary key: one link per pair
    - achieved is False until the user unlocks the achievement
"""

import uuid

from sqlalchemy import Integer, Boolean, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class UserAchievement(Base):
    __tablename__ = "user_achievements"

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    achievement_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("achievements.id", ondelete="CASCADE"),
        primary_key=True,
    )
    achieved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
