"""Message Service: direct messages between two users.

Invariants:
    - get_messages returns both directions of the conversation, oldest first
    - Reading a conversation marks the sender→receiver messages as viewed
    - add_message requires both users to exist (ResourceNotFoundError otherwise)
"""

import logging

from sqlalchemy import select, update, or_, and_, exists
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import UserId
from app.core.errors import (
    ErrorContext, MessageCreationError, MessageQueryError, ResourceNotFoundError,
)
from app.models.message import Message
from app.models.user import User

logger = logging.getLogger(__name__)


class MessageService:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_messages(
        self, sender_id: UserId, receiver_id: UserId,
    ) -> list[Message]:
        """Conversation between two users; marks sender's messages as viewed."""
        try:
            result = await self.db.execute(
                select(Message)
                .where(or_(
                    and_(Message.sender_id == sender_id,
                         Message.receiver_id == receiver_id),
                    and_(Message.sender_id == receiver_id,
                         Message.receiver_id == sender_id),
                ))
                .order_by(Message.created_at, Message.id),
            )
            messages = list(result.scalars().all())

            await self.db.execute(
                update(Message)
                .where(Message.sender_id == sender_id)
                .where(Message.receiver_id == receiver_id)
                .where(Message.viewed.is_(False))
                .values(viewed=True),
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise MessageQueryError(
                e, ErrorContext(operation="get_messages"),
            ) from e
        return messages

    async def add_message(
        self, sender_id: UserId, receiver_id: UserId, content: str,
    ) -> Message:
        try:
            for user_id in (sender_id, receiver_id):
                if await self.db.get(User, user_id) is None:
                    raise ResourceNotFoundError("User", str(user_id))

            message = Message(
                sender_id=sender_id, receiver_id=receiver_id, content=content,
            )
            self.db.add(message)
            await self.db.commit()
            await self.db.refresh(message)
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise MessageCreationError(
                e, ErrorContext(operation="add_message"),
            ) from e

        logger.info(
            f"Message {message.id} stored", extra={"operation": "add_message"},
        )
        return message

    async def has_not_viewed_messages(
        self, sender_id: UserId, receiver_id: UserId,
    ) -> bool:
        """True if some message from sender to receiver is still unread."""
        try:
            result = await self.db.execute(
                select(exists().where(
                    Message.sender_id == sender_id,
                    Message.receiver_id == receiver_id,
                    Message.viewed.is_(False),
                )),
            )
            return bool(result.scalar())
        except SQLAlchemyError as e:
            raise MessageQueryError(
                e, ErrorContext(operation="has_not_viewed_messages"),
            ) from e
