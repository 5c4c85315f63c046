"""Initial schema: games, private games, users, seed tables and messages.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

private_games.id is both primary key and FK to games.id with ON DELETE CASCADE:
removing a game removes its private facet, removing the facet keeps the game.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "games",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="active"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "private_games",
        sa.Column("id", sa.Integer, sa.ForeignKey("games.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("passwd", sa.String(255), nullable=False),
        sa.Column("link", sa.String(500), nullable=False),
        sa.Column("max_players", sa.Integer, nullable=False),
        sa.Column("current_players", sa.Integer, nullable=False, server_default="0"),
        sa.CheckConstraint("max_players >= 0", name="ck_private_games_max_players"),
        sa.CheckConstraint("current_players >= 0", name="ck_private_games_current_players"),
    )

    op.create_table(
        "users",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column("experience", sa.Integer, nullable=False, server_default="0"),
        sa.Column("last_connection", sa.Date, nullable=True),
    )

    op.create_table(
        "levels",
        sa.Column("level_number", sa.Integer, primary_key=True, autoincrement=False),
        sa.Column("experience_required", sa.Integer, nullable=False),
    )

    op.create_table(
        "achievements",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("experience_granted", sa.Integer, nullable=False),
    )

    op.create_table(
        "user_achievements",
        sa.Column("user_id", UUID(as_uuid=True), sa.ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("achievement_id", sa.Integer, sa.ForeignKey("achievements.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("achieved", sa.Boolean, nullable=False, server_default="false"),
    )

    op.create_table(
        "items",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("type", sa.String(50), nullable=False, server_default=""),
    )

    op.create_table(
        "messages",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("sender_id", UUID(as_uuid=True), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("receiver_id", UUID(as_uuid=True), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("viewed", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_messages_sender_receiver", "messages", ["sender_id", "receiver_id"])


def downgrade() -> None:
    op.drop_index("ix_messages_sender_receiver", table_name="messages")
    op.drop_table("messages")
    op.drop_table("items")
    op.drop_table("user_achievements")
    op.drop_table("achievements")
    op.drop_table("levels")
    op.drop_table("users")
    op.drop_table("private_games")
    op.drop_table("games")
