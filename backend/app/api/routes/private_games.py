"""Private Games: HTTP adapter over PrivateGameService.

Invariants:
    - Service None results become 404 via ResourceNotFoundError (global handler)
    - A wrong password on join is reported exactly like an unknown game id
    - Service errors (DataAccessError subclasses) propagate to the global handler

Design Decisions:
    - Gateway injected through get_game_server_gateway: tests override it like get_db
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import GameId
from app.core.errors import ErrorContext, ResourceNotFoundError
from app.infrastructure.database import get_db
from app.infrastructure.game_server_gateway import (
    GameServerGateway, get_game_server_gateway,
)
from app.schemas.private_game import (
    PrivateGameCreate, PrivateGameDeleted, PrivateGameJoin, PrivateGameLink,
    PrivateGameList, PrivateGamePlayers, PrivateGameSummary,
)
from app.services.private_game_service import PrivateGameService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/privateGames", tags=["private-games"])


def get_private_game_service(
    db: AsyncSession = Depends(get_db),
    gateway: GameServerGateway = Depends(get_game_server_gateway),
) -> PrivateGameService:
    return PrivateGameService(db, gateway)


@router.get("", response_model=PrivateGameList)
async def list_private_games(
    service: PrivateGameService = Depends(get_private_game_service),
):
    """List private games without passwords or links."""
    games = await service.list_private_games()
    return PrivateGameList(
        private_games=[PrivateGameSummary(**g) for g in games],
    )


@router.post(
    "", response_model=PrivateGameLink,
    status_code=status.HTTP_201_CREATED,
)
async def create_private_game(
    body: PrivateGameCreate,
    service: PrivateGameService = Depends(get_private_game_service),
):
    link = await service.create_private_game(body.passwd, body.max_players)
    return PrivateGameLink(link=link)


@router.post("/join", response_model=PrivateGameLink)
async def join_private_game(
    body: PrivateGameJoin,
    service: PrivateGameService = Depends(get_private_game_service),
):
    """Return the game link when id and password match."""
    joined = await service.join_private_game(GameId(body.game_id), body.passwd)
    if joined is None:
        raise ResourceNotFoundError(
            "Private game", str(body.game_id),
            ErrorContext(game_id=body.game_id, operation="join_private_game"),
        )
    return PrivateGameLink(**joined)


@router.delete("/{game_id}", response_model=PrivateGameDeleted)
async def delete_private_game(
    game_id: int,
    service: PrivateGameService = Depends(get_private_game_service),
):
    deleted = await service.delete_private_game(GameId(game_id))
    if deleted is None:
        raise ResourceNotFoundError(
            "Private game", str(game_id),
            ErrorContext(game_id=game_id, operation="delete_private_game"),
        )
    return PrivateGameDeleted(deleted=deleted)


@router.get("/{game_id}/players", response_model=PrivateGamePlayers)
async def get_players(
    game_id: int,
    service: PrivateGameService = Depends(get_private_game_service),
):
    players = await service.get_players(GameId(game_id))
    if players is None:
        raise ResourceNotFoundError(
            "Private game", str(game_id),
            ErrorContext(game_id=game_id, operation="get_players"),
        )
    return PrivateGamePlayers(current_players=players)
