"""Messages: service and routes for direct messages between two users.

Invariants:
    - add_message stores an unread message, rejects unknown users with 404
    - get_messages returns both directions oldest first and marks sender→receiver as read
    - has_not_viewed_messages only looks at sender→receiver messages
"""

import uuid

import pytest

from app.core.errors import ResourceNotFoundError
from app.services.message_service import MessageService


@pytest.fixture
def service(test_db):
    return MessageService(test_db)


# -- service -------------------------------------------------------------------

async def test_add_message_stores_unread_message(service, seed_users):
    alice, bob = seed_users

    message = await service.add_message(alice.id, bob.id, "hi bob")

    assert message.id is not None
    assert message.sender_id == alice.id
    assert message.receiver_id == bob.id
    assert message.viewed is False


async def test_add_message_to_unknown_user_raises_not_found(service, seed_users):
    alice, _ = seed_users

    with pytest.raises(ResourceNotFoundError):
        await service.add_message(alice.id, uuid.uuid4(), "anyone there?")


async def test_get_messages_returns_conversation_in_order(service, seed_users):
    alice, bob = seed_users
    await service.add_message(alice.id, bob.id, "first")
    await service.add_message(bob.id, alice.id, "second")
    await service.add_message(alice.id, bob.id, "third")

    messages = await service.get_messages(alice.id, bob.id)

    assert [m.content for m in messages] == ["first", "second", "third"]


async def test_get_messages_ignores_other_conversations(service, seed_users, test_db):
    from app.models.user import User

    alice, bob = seed_users
    carol = User(id=uuid.uuid4(), username="carol", description="", experience=0)
    test_db.add(carol)
    await test_db.commit()
    await service.add_message(alice.id, bob.id, "for bob")
    await service.add_message(alice.id, carol.id, "for carol")

    messages = await service.get_messages(alice.id, bob.id)

    assert [m.content for m in messages] == ["for bob"]


async def test_reading_marks_sender_messages_as_viewed(service, seed_users):
    alice, bob = seed_users
    await service.add_message(alice.id, bob.id, "hello")
    await service.add_message(bob.id, alice.id, "hey")

    assert await service.has_not_viewed_messages(alice.id, bob.id) is True
    await service.get_messages(alice.id, bob.id)

    assert await service.has_not_viewed_messages(alice.id, bob.id) is False
    # the reply in the other direction is still unread
    assert await service.has_not_viewed_messages(bob.id, alice.id) is True


async def test_has_not_viewed_messages_without_messages(service, seed_users):
    alice, bob = seed_users
    assert await service.has_not_viewed_messages(alice.id, bob.id) is False


# -- routes --------------------------------------------------------------------

async def test_add_message_route(client, seed_users):
    alice, bob = seed_users

    res = await client.post("/api/messages/add_message", json={
        "idEmisor": str(alice.id), "idReceptor": str(bob.id), "content": "  hi  ",
    })

    assert res.status_code == 201
    body = res.json()
    assert body["idEmisor"] == str(alice.id)
    assert body["idReceptor"] == str(bob.id)
    assert body["content"] == "hi"
    assert body["viewed"] is False
    assert "date" in body


async def test_add_message_route_unknown_user_returns_404(client, seed_users):
    alice, _ = seed_users

    res = await client.post("/api/messages/add_message", json={
        "idEmisor": str(alice.id), "idReceptor": str(uuid.uuid4()), "content": "hi",
    })

    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_add_message_route_rejects_blank_content(client, seed_users):
    alice, bob = seed_users

    res = await client.post("/api/messages/add_message", json={
        "idEmisor": str(alice.id), "idReceptor": str(bob.id), "content": "   ",
    })

    assert res.status_code == 400


async def test_get_messages_and_unviewed_routes(client, seed_users):
    alice, bob = seed_users
    await client.post("/api/messages/add_message", json={
        "idEmisor": str(alice.id), "idReceptor": str(bob.id), "content": "ping",
    })

    before = await client.get(
        f"/api/messages/has_not_viewed_messages/{alice.id}/{bob.id}",
    )
    conversation = await client.get(
        f"/api/messages/get_messages/{alice.id}/{bob.id}",
    )
    after = await client.get(
        f"/api/messages/has_not_viewed_messages/{alice.id}/{bob.id}",
    )

    assert before.json() == {"hasNotViewedMessages": True}
    assert [m["content"] for m in conversation.json()] == ["ping"]
    assert after.json() == {"hasNotViewedMessages": False}


async def test_get_messages_rejects_malformed_user_id(client):
    res = await client.get(f"/api/messages/get_messages/not-a-uuid/{uuid.uuid4()}")
    assert res.status_code == 400
