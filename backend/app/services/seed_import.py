"""Seed Import: loads users, levels, achievements, links and items from CSV files.

Invariants:
    - Seed files have no header row; columns are positional per table
    - Invalid rows are skipped with a warning, never inserted half-parsed
    - Each importer commits once and returns the number of rows inserted
    - Unreadable files and insert failures raise SeedImportError (rolled back)

Design Decisions:
    - Field coercion lives in core/parse_csv_fields.py; this module only does IO
    - users/levels with no valid rows log an error and insert nothing, while
      achievements treat an empty file as a failure
    - user_achievements ignores duplicates (already stored or repeated in the file)
"""

import csv
import logging
from pathlib import Path
from typing import Callable, Iterator

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import SeedTable
from app.core.errors import SeedImportError
from app.core.parse_csv_fields import (
    parse_bool, parse_date, parse_int_value, parse_optional_int,
    parse_string, parse_uuid,
)
from app.models.achievement import Achievement
from app.models.item import Item
from app.models.level import Level
from app.models.user import User
from app.models.user_achievement import UserAchievement

logger = logging.getLogger(__name__)

SEED_FILES: dict[SeedTable, str] = {
    SeedTable.USERS: "users.csv",
    SeedTable.LEVELS: "levels.csv",
    SeedTable.ACHIEVEMENTS: "achievements.csv",
    SeedTable.USER_ACHIEVEMENTS: "user_ach.csv",
    SeedTable.ITEMS: "items.csv",
}


def _read_rows(
    path: Path, table: SeedTable, delimiter: str, fieldnames: list[str],
) -> Iterator[dict]:
    try:
        with open(path, newline="", encoding="utf-8") as f:
            yield from csv.DictReader(f, fieldnames=fieldnames, delimiter=delimiter)
    except (OSError, csv.Error) as e:
        logger.error(f"Cannot read CSV file {path}: {e}", extra={"table": table.value})
        raise SeedImportError(f"cannot read {path}: {e}", table.value) from e


async def _insert_all(
    db: AsyncSession, table: SeedTable, rows: list,
) -> int:
    try:
        db.add_all(rows)
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(
            f"Error inserting into {table.value}: {e}",
            extra={"table": table.value},
        )
        raise SeedImportError(str(e), table.value) from e

    logger.info(
        f"{len(rows)} row(s) inserted into {table.value}",
        extra={"table": table.value, "rows": len(rows)},
    )
    return len(rows)


async def import_users(db: AsyncSession, path: Path) -> int:
    users = []
    for row in _read_rows(
        path, SeedTable.USERS, ";",
        ["id", "username", "description", "experience", "last_connection"],
    ):
        user_id = parse_uuid(row["id"])
        if not user_id:
            logger.warning("Skipping user with invalid id")
            continue
        users.append(User(
            id=user_id,
            username=parse_string(row["username"]),
            description=parse_string(row["description"]),
            experience=parse_int_value(row["experience"]),
            last_connection=parse_date(row["last_connection"]),
        ))

    if not users:
        logger.error(f"No valid users found in {path}", extra={"table": "users"})
        return 0
    return await _insert_all(db, SeedTable.USERS, users)


async def import_levels(db: AsyncSession, path: Path) -> int:
    levels = []
    for row in _read_rows(
        path, SeedTable.LEVELS, ";", ["level_number", "experience_required"],
    ):
        level_number = parse_optional_int(row["level_number"])
        experience_required = parse_optional_int(row["experience_required"])
        if level_number is None or experience_required is None:
            logger.warning(f"Skipping level row with non-numeric fields: {row}")
            continue
        levels.append(Level(
            level_number=level_number, experience_required=experience_required,
        ))

    if not levels:
        logger.error(f"No valid levels found in {path}", extra={"table": "levels"})
        return 0
    return await _insert_all(db, SeedTable.LEVELS, levels)


async def import_achievements(db: AsyncSession, path: Path) -> int:
    achievements = []
    for row in _read_rows(
        path, SeedTable.ACHIEVEMENTS, ",", ["name", "description", "experience"],
    ):
        name = parse_string(row["name"])
        description = parse_string(row["description"])
        experience = parse_optional_int(row["experience"])
        if experience is None or not name or not description:
            continue
        achievements.append(Achievement(
            name=name, description=description, experience_granted=experience,
        ))

    if not achievements:
        raise SeedImportError("empty CSV file or invalid data", "achievements")
    return await _insert_all(db, SeedTable.ACHIEVEMENTS, achievements)


async def import_user_achievements(db: AsyncSession, path: Path) -> int:
    try:
        result = await db.execute(
            select(UserAchievement.user_id, UserAchievement.achievement_id),
        )
        seen = {(r.user_id, r.achievement_id) for r in result.all()}
    except SQLAlchemyError as e:
        raise SeedImportError(str(e), "user_achievements") from e

    links = []
    for row in _read_rows(
        path, SeedTable.USER_ACHIEVEMENTS, ";",
        ["id_user", "id_achievement", "achieved"],
    ):
        user_id = parse_uuid(row["id_user"])
        achievement_id = parse_optional_int(row["id_achievement"])
        if not user_id or achievement_id is None:
            continue
        if (user_id, achievement_id) in seen:
            continue
        seen.add((user_id, achievement_id))
        links.append(UserAchievement(
            user_id=user_id,
            achievement_id=achievement_id,
            achieved=parse_bool(row["achieved"]),
        ))

    if not links:
        logger.info("No new user achievements to insert")
        return 0
    return await _insert_all(db, SeedTable.USER_ACHIEVEMENTS, links)


async def import_items(db: AsyncSession, path: Path) -> int:
    items = [
        Item(name=parse_string(row["name"]), type=parse_string(row["type"]))
        for row in _read_rows(path, SeedTable.ITEMS, ",", ["name", "type"])
    ]
    inserted = await _insert_all(db, SeedTable.ITEMS, items)
    for item in items:
        logger.info(f"Item inserted: {item.name} with id {item.id}")
    return inserted


IMPORTERS: dict[SeedTable, Callable] = {
    SeedTable.USERS: import_users,
    SeedTable.LEVELS: import_levels,
    SeedTable.ACHIEVEMENTS: import_achievements,
    SeedTable.USER_ACHIEVEMENTS: import_user_achievements,
    SeedTable.ITEMS: import_items,
}


async def import_table(db: AsyncSession, table: SeedTable, data_dir: Path) -> int:
    """Run the importer of one table against its file in data_dir."""
    return await IMPORTERS[table](db, data_dir / SEED_FILES[table])
