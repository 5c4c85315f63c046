"""Boundary Protocols: contracts between services and outside collaborators.

Invariants:
    - Services depend on these Protocols, never on concrete gateway classes
    - Implementations provided by infrastructure via dependency injection

Design Decisions:
    - Protocol over ABC: test fakes need no inheritance
"""

from typing import Protocol


class SessionEndpointProvider(Protocol):
    """Contract for the external game server that hosts private game sessions."""

    async def allocate_session(self) -> str:
        """Return the link clients use to connect to a fresh game session.

        Raises GatewayUnavailableError when no endpoint can be obtained.
        """
        ...
