"""Messages: direct messaging routes between two users.

Invariants:
    - Path names kept from the public API: get_messages, add_message, has_not_viewed_messages
    - idEmisor is the sender, idReceptor the receiver
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import UserId
from app.infrastructure.database import get_db
from app.models.message import Message
from app.schemas.message import MessageCreate, MessageResponse, UnviewedMessages
from app.services.message_service import MessageService

router = APIRouter(prefix="/api/messages", tags=["messages"])


def _to_response(message: Message) -> MessageResponse:
    return MessageResponse(
        id=message.id,
        sender_id=message.sender_id,
        receiver_id=message.receiver_id,
        content=message.content,
        viewed=message.viewed,
        created_at=message.created_at,
    )


@router.get(
    "/get_messages/{id_emisor}/{id_receptor}",
    response_model=list[MessageResponse],
)
async def get_messages(
    id_emisor: UUID, id_receptor: UUID, db: AsyncSession = Depends(get_db),
):
    """Conversation between two users, oldest first."""
    messages = await MessageService(db).get_messages(
        UserId(id_emisor), UserId(id_receptor),
    )
    return [_to_response(m) for m in messages]


@router.post(
    "/add_message", response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_message(body: MessageCreate, db: AsyncSession = Depends(get_db)):
    message = await MessageService(db).add_message(
        UserId(body.sender_id), UserId(body.receiver_id), body.content,
    )
    return _to_response(message)


@router.get(
    "/has_not_viewed_messages/{id_emisor}/{id_receptor}",
    response_model=UnviewedMessages,
)
async def has_not_viewed_messages(
    id_emisor: UUID, id_receptor: UUID, db: AsyncSession = Depends(get_db),
):
    pending = await MessageService(db).has_not_viewed_messages(
        UserId(id_emisor), UserId(id_receptor),
    )
    return UnviewedMessages(has_not_viewed_messages=pending)
