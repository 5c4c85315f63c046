"""Game Server Gateway: obtains the session endpoint where a private game will run.

Invariants:
    - allocate_session() returns a non-empty link or raises GatewayUnavailableError
    - Transport errors (connection, timeout) retried up to max_retries times, no backoff
    - HTTP error statuses and malformed bodies fail immediately
    - Every request bounded by timeout_seconds

Design Decisions:
    - STATIC strategy returns the configured link without any network call; the game
      server contract is not final and this keeps private games usable meanwhile
    - HTTP strategy reads `gameEndpoint` from the JSON body of GET {base_url}{endpoint_path}
    - transport is injectable so tests can plug in httpx.MockTransport
"""

import logging
from typing import Any

import httpx

from app.config import Settings, get_settings
from app.core.domain_types import GatewayStrategy
from app.core.errors import GatewayUnavailableError

logger = logging.getLogger(__name__)

ENDPOINT_FIELD = "gameEndpoint"


class GameServerGateway:
    """Asks the external game server for a fresh session endpoint."""

    def __init__(
        self,
        strategy: GatewayStrategy = GatewayStrategy.STATIC,
        static_link: str = "",
        base_url: str = "",
        endpoint_path: str = "/",
        timeout_seconds: float = 10.0,
        max_retries: int = 0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.strategy = strategy
        self.static_link = static_link
        self.base_url = base_url.rstrip("/")
        self.endpoint_path = endpoint_path
        self.timeout_seconds = timeout_seconds
        self.max_retries = max(0, max_retries)
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "GameServerGateway":
        return cls(
            strategy=settings.game_server_strategy,
            static_link=settings.game_server_static_link,
            base_url=settings.game_server_url,
            endpoint_path=settings.game_server_endpoint_path,
            timeout_seconds=settings.game_server_timeout_seconds,
            max_retries=settings.game_server_max_retries,
        )

    async def allocate_session(self) -> str:
        if self.strategy == GatewayStrategy.STATIC:
            link = self.static_link
        else:
            link = await self._request_endpoint()

        if not link:
            raise GatewayUnavailableError(
                "Could not obtain the private game endpoint",
            )
        return link

    async def _request_endpoint(self) -> str:
        if not self.base_url:
            raise GatewayUnavailableError("Game server URL is not configured")

        for attempt in range(self.max_retries + 1):
            try:
                async with httpx.AsyncClient(
                    base_url=self.base_url,
                    timeout=self.timeout_seconds,
                    transport=self._transport,
                ) as client:
                    resp = await client.get(self.endpoint_path)
            except httpx.TransportError as e:
                if attempt < self.max_retries:
                    logger.warning(
                        f"Game server unreachable, retrying "
                        f"({attempt + 1}/{self.max_retries}): {e}",
                    )
                    continue
                raise GatewayUnavailableError(
                    f"Game server unreachable: {e}",
                ) from e
            return self._extract_link(resp)

        raise GatewayUnavailableError("Game server unreachable")

    @staticmethod
    def _extract_link(resp: httpx.Response) -> str:
        if resp.status_code != 200:
            body = resp.text[:500]
            raise GatewayUnavailableError(
                f"Game server request failed: {resp.status_code} {body}",
            )
        try:
            data: Any = resp.json()
        except ValueError as e:
            raise GatewayUnavailableError(
                "Game server returned a non-JSON body",
            ) from e

        link = data.get(ENDPOINT_FIELD) if isinstance(data, dict) else None
        if not isinstance(link, str) or not link.strip():
            raise GatewayUnavailableError(
                "Game server returned no session endpoint",
            )
        return link.strip()


def get_game_server_gateway() -> GameServerGateway:
    """FastAPI dependency for the configured gateway."""
    return GameServerGateway.from_settings(get_settings())
