"""Private Game Schemas: request/response contracts for /api/privateGames.

Invariants:
    - passwd is stored and compared exactly as sent; blank passwords are rejected
    - PrivateGameCreate.max_players: non-negative
    - PrivateGameJoin.game_id is any integer; unknown ids are a 404, not a 400
    - PrivateGameSummary never carries passwd or link
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class PrivateGameCreate(_CamelModel):
    passwd: str = Field(min_length=1, max_length=255)
    max_players: int = Field(alias="maxPlayers", ge=0)

    @field_validator("passwd")
    @classmethod
    def reject_blank_passwd(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("passwd cannot be empty or whitespace")
        return v


class PrivateGameJoin(_CamelModel):
    game_id: int = Field(alias="gameId")
    passwd: str = Field(min_length=1, max_length=255)


class PrivateGameLink(_CamelModel):
    link: str


class PrivateGameSummary(_CamelModel):
    """Public listing entry."""
    id: int
    max_players: int = Field(alias="maxPlayers")
    current_players: int = Field(alias="currentPlayers")


class PrivateGameList(_CamelModel):
    private_games: list[PrivateGameSummary] = Field(alias="privateGames")


class PrivateGameDeleted(_CamelModel):
    deleted: int


class PrivateGamePlayers(_CamelModel):
    current_players: int = Field(alias="currentPlayers")
