"""Level ORM: experience threshold per level number."""

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Level(Base):
    __tablename__ = "levels"

    level_number: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False,
    )
    experience_required: Mapped[int] = mapped_column(Integer, nullable=False)
