"""Private Game Service: create, list, join and delete password-protected games.

Invariants:
    - Game + PrivateGame are written in one transaction; the gateway is asked for a
      link before anything is written, so a gateway failure (or an empty link)
      persists neither row
    - Listings never expose passwd or link
    - "Not found" is None, never an exception; a wrong password is indistinguishable
      from an unknown game id
    - Every failure is re-raised as an operation-scoped DataAccessError with the
      original exception attached as `cause`

Design Decisions:
    - delete_private_game removes only the private facet; the Game row is kept as a
      historical record (see DESIGN.md open question)
    - current_players is only read here; no operation changes occupancy yet
"""

import logging

from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import GameId, GameStatus
from app.core.errors import (
    ErrorContext,
    GatewayUnavailableError,
    PrivateGameCreationError,
    PrivateGameDeletionError,
    PrivateGameJoinError,
    PrivateGamePlayerCountError,
    PrivateGameQueryError,
)
from app.core.repository_protocols import SessionEndpointProvider
from app.models.game import Game
from app.models.private_game import PrivateGame

logger = logging.getLogger(__name__)


class PrivateGameService:
    """Private game lifecycle on top of the games/private_games tables."""

    def __init__(self, db: AsyncSession, gateway: SessionEndpointProvider):
        self.db = db
        self.gateway = gateway

    async def create_private_game(self, passwd: str, max_players: int) -> str:
        """Create a private game and return the link players connect to."""
        try:
            link = await self.gateway.allocate_session()
            if not link:
                raise GatewayUnavailableError(
                    "Could not obtain the private game endpoint",
                    ErrorContext(operation="create_private_game"),
                )

            game = Game(status=GameStatus.ACTIVE.value)
            self.db.add(game)
            await self.db.flush()

            self.db.add(PrivateGame(
                id=game.id,
                passwd=passwd,
                link=link,
                max_players=max_players,
                current_players=0,
            ))
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(
                f"Failed to create private game: {e}", exc_info=True,
                extra={"operation": "create_private_game"},
            )
            raise PrivateGameCreationError(
                e, ErrorContext(operation="create_private_game"),
            ) from e

        logger.info(
            f"Private game {game.id} created",
            extra={"game_id": game.id, "operation": "create_private_game"},
        )
        return link

    async def list_private_games(self) -> list[dict]:
        """Public-safe fields of every private game."""
        try:
            result = await self.db.execute(
                select(
                    PrivateGame.id,
                    PrivateGame.max_players,
                    PrivateGame.current_players,
                ).order_by(PrivateGame.id),
            )
        except SQLAlchemyError as e:
            raise PrivateGameQueryError(
                e, ErrorContext(operation="list_private_games"),
            ) from e

        return [
            {
                "id": row.id,
                "max_players": row.max_players,
                "current_players": row.current_players,
            }
            for row in result.all()
        ]

    async def join_private_game(self, game_id: GameId, passwd: str) -> dict | None:
        """Link of the game when both id and password match, else None."""
        try:
            result = await self.db.execute(
                select(PrivateGame.link)
                .where(PrivateGame.id == game_id)
                .where(PrivateGame.passwd == passwd),
            )
            link = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise PrivateGameJoinError(
                e, ErrorContext(game_id=game_id, operation="join_private_game"),
            ) from e

        if link is None:
            return None
        return {"link": link}

    async def delete_private_game(self, game_id: GameId) -> int | None:
        """Delete the private facet of a game. Returns rows removed, or None."""
        try:
            result = await self.db.execute(
                delete(PrivateGame).where(PrivateGame.id == game_id),
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise PrivateGameDeletionError(
                e, ErrorContext(game_id=game_id, operation="delete_private_game"),
            ) from e

        deleted = result.rowcount
        if not deleted:
            return None

        # Game row stays behind as history.
        logger.info(
            f"Private game {game_id} deleted ({deleted} row(s))",
            extra={"game_id": game_id, "operation": "delete_private_game"},
        )
        return deleted

    async def get_players(self, game_id: GameId) -> int | None:
        """Current player count, or None if the private game does not exist."""
        try:
            result = await self.db.execute(
                select(PrivateGame.current_players)
                .where(PrivateGame.id == game_id),
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise PrivateGamePlayerCountError(
                e, ErrorContext(game_id=game_id, operation="get_players"),
            ) from e
