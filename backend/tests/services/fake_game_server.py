"""Fake game server: controllable stand-in for GameServerGateway in service tests."""

from app.core.errors import GatewayUnavailableError

GAME_LINK = "http://localhost:3000/api/privateGames"


class FakeGateway:
    """Hands out `link`, or raises GatewayUnavailableError when `fail` is set."""

    def __init__(self, link: str = GAME_LINK):
        self.link = link
        self.fail = False
        self.calls = 0

    async def allocate_session(self) -> str:
        self.calls += 1
        if self.fail:
            raise GatewayUnavailableError("Could not obtain the private game endpoint")
        return self.link
