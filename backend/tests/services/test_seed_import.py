"""Seed Import: CSV importers against an in-memory database.

Invariants:
    - Rows with unusable keys are skipped, valid rows inserted
    - users/levels without valid rows insert nothing and return 0
    - achievements without valid rows raise SeedImportError
    - user_achievements ignores duplicates
    - missing files raise SeedImportError
"""

import uuid
from datetime import date

import pytest
from sqlalchemy import select

from app.core.domain_types import SeedTable
from app.core.errors import SeedImportError
from app.models.achievement import Achievement
from app.models.item import Item
from app.models.level import Level
from app.models.user import User
from app.models.user_achievement import UserAchievement
from app.services.seed_import import (
    import_achievements,
    import_items,
    import_levels,
    import_table,
    import_user_achievements,
    import_users,
)

USER_A = "3f2b8c1e-9d4a-4b6e-8f1a-2c3d4e5f6a7b"
USER_B = "7a6b5c4d-3e2f-4a1b-9c8d-7e6f5a4b3c2d"


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


async def _all(db, model):
    return (await db.execute(select(model))).scalars().all()


async def test_import_users_parses_and_skips_invalid_ids(test_db, tmp_path):
    path = _write(tmp_path, "users.csv", (
        f"{USER_A};  alice ;likes chess;120;05/03/2024\n"
        "not-a-uuid;mallory;;10;01/01/2024\n"
        f"{USER_B};bob;;abc;bad-date\n"
    ))

    inserted = await import_users(test_db, path)

    assert inserted == 2
    users = {str(u.id): u for u in await _all(test_db, User)}
    alice = users[USER_A]
    assert alice.username == "alice"
    assert alice.description == "likes chess"
    assert alice.experience == 120
    assert alice.last_connection == date(2024, 3, 5)
    bob = users[USER_B]
    assert bob.experience == 0
    assert bob.last_connection is None


async def test_import_users_without_valid_rows_inserts_nothing(test_db, tmp_path):
    path = _write(tmp_path, "users.csv", "bad;eve;;1;01/01/2024\n")

    assert await import_users(test_db, path) == 0
    assert await _all(test_db, User) == []


async def test_import_levels(test_db, tmp_path):
    path = _write(tmp_path, "levels.csv", "1;0\n 2 ; 100 \nthree;200\n")

    assert await import_levels(test_db, path) == 2
    levels = sorted(await _all(test_db, Level), key=lambda lvl: lvl.level_number)
    assert [(lvl.level_number, lvl.experience_required) for lvl in levels] == [
        (1, 0), (2, 100),
    ]


async def test_import_achievements_requires_name_description_and_experience(
    test_db, tmp_path,
):
    path = _write(tmp_path, "achievements.csv", (
        "First win,Win your first game,50\n"
        ",No name,10\n"
        "Broken,Bad experience,lots\n"
    ))

    assert await import_achievements(test_db, path) == 1
    (achievement,) = await _all(test_db, Achievement)
    assert achievement.name == "First win"
    assert achievement.experience_granted == 50


async def test_import_achievements_empty_file_raises(test_db, tmp_path):
    path = _write(tmp_path, "achievements.csv", "")

    with pytest.raises(SeedImportError) as exc_info:
        await import_achievements(test_db, path)

    assert exc_info.value.table == "achievements"


async def test_import_user_achievements_ignores_duplicates(test_db, tmp_path):
    test_db.add_all([
        User(id=uuid.UUID(USER_A), username="alice", description="", experience=0),
        Achievement(id=1, name="First win", description="Win", experience_granted=50),
        Achievement(id=2, name="Veteran", description="Play 100", experience_granted=500),
    ])
    await test_db.commit()
    path = _write(tmp_path, "user_ach.csv", (
        f"{USER_A};1;TRUE\n"
        f"{USER_A};1;false\n"
        f"{USER_A};2;false\n"
        "bad-id;1;true\n"
        f"{USER_A};x;true\n"
    ))

    assert await import_user_achievements(test_db, path) == 2
    links = {(str(link.user_id), link.achievement_id): link.achieved
             for link in await _all(test_db, UserAchievement)}
    assert links == {(USER_A, 1): True, (USER_A, 2): False}

    # second run finds everything already stored
    assert await import_user_achievements(test_db, path) == 0


async def test_import_items(test_db, tmp_path):
    path = _write(tmp_path, "items.csv", "Red hat,cosmetic\n Sword , weapon \n")

    assert await import_items(test_db, path) == 2
    items = sorted(await _all(test_db, Item), key=lambda i: i.id)
    assert [(i.name, i.type) for i in items] == [
        ("Red hat", "cosmetic"), ("Sword", "weapon"),
    ]


async def test_missing_file_raises_seed_import_error(test_db, tmp_path):
    with pytest.raises(SeedImportError) as exc_info:
        await import_items(test_db, tmp_path / "missing.csv")

    assert exc_info.value.table == "items"


async def test_import_table_uses_conventional_file_name(test_db, tmp_path):
    _write(tmp_path, "levels.csv", "1;0\n")

    assert await import_table(test_db, SeedTable.LEVELS, tmp_path) == 1


async def test_insert_failure_raises_and_rolls_back(test_db, tmp_path):
    path = _write(tmp_path, "levels.csv", "1;0\n1;50\n")

    with pytest.raises(SeedImportError):
        await import_levels(test_db, path)

    assert await _all(test_db, Level) == []
