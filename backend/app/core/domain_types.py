"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - GameId wraps the integer primary key shared by games and private_games
    - UserId wraps the UUID primary key of users
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers
    - str Enums: serialize to JSON and to String columns without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

GameId = NewType("GameId", int)
UserId = NewType("UserId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class GameStatus(str, Enum):
    """Game lifecycle states, maps to DB `status` column."""
    ACTIVE = "active"
    FINISHED = "finished"


class GatewayStrategy(str, Enum):
    """How the game server gateway obtains a session endpoint."""
    STATIC = "static"
    HTTP = "http"


class SeedTable(str, Enum):
    """Tables the CSV importer can fill, in dependency order."""
    USERS = "users"
    LEVELS = "levels"
    ACHIEVEMENTS = "achievements"
    USER_ACHIEVEMENTS = "user_achievements"
    ITEMS = "items"
