"""Root conftest: shared test configuration."""

import os

# Keep tests on SQLite and the static game server link.
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("GAME_SERVER_STRATEGY", "static")
os.environ.setdefault("LOG_FORMAT", "text")
