"""ORM Models: SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Game and PrivateGame share their primary key (one-to-one)

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from app.models.game import Game  # noqa: F401
from app.models.private_game import PrivateGame  # noqa: F401
from app.models.user import User  # noqa: F401
from app.models.level import Level  # noqa: F401
from app.models.achievement import Achievement  # noqa: F401
from app.models.user_achievement import UserAchievement  # noqa: F401
from app.models.item import Item  # noqa: F401
from app.models.message import Message  # noqa: F401
