"""Seed Import CLI: one-shot loader for the CSV seed files.

Usage:
    seed-import                          # all tables, files from settings.seed_data_dir
    seed-import users items --data-dir ./data
    seed-import --database-url sqlite+aiosqlite:///local.db

Invariants:
    - Tables run in dependency order (users before user_achievements) whatever the argv order
    - Each table is imported in its own session; a failure stops the run with exit code 1
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from app.config import get_settings
from app.core.domain_types import SeedTable
from app.core.errors import SeedImportError
from app.db.session import create_session_factory
from app.infrastructure.observability import setup_logging
from app.services.seed_import import import_table

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seed-import",
        description="Import seed data (users, levels, achievements, ...) from CSV files.",
    )
    parser.add_argument(
        "tables", nargs="*", metavar="TABLE",
        help=f"Tables to import, any of: {', '.join(t.value for t in SeedTable)} (default: all)",
    )
    parser.add_argument(
        "--data-dir", type=Path, default=None,
        help="Directory holding the CSV files (default: settings.seed_data_dir)",
    )
    parser.add_argument(
        "--database-url", default=None,
        help="Override DATABASE_URL",
    )
    return parser


def resolve_tables(names: list[str]) -> list[SeedTable]:
    """Requested tables in dependency order; every table when none requested."""
    requested = {SeedTable(n) for n in names}
    return [t for t in SeedTable if not requested or t in requested]


async def run_import(
    database_url: str, data_dir: Path, tables: list[SeedTable],
) -> dict[str, int]:
    engine, session_factory = create_session_factory(database_url)
    summary: dict[str, int] = {}
    try:
        for table in tables:
            async with session_factory() as db:
                summary[table.value] = await import_table(db, table, data_dir)
    finally:
        await engine.dispose()
    return summary


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level, "text")

    data_dir = args.data_dir or Path(settings.seed_data_dir)
    database_url = args.database_url or settings.database_url
    try:
        tables = resolve_tables(args.tables)
    except ValueError as e:
        parser.error(str(e))

    try:
        summary = asyncio.run(run_import(database_url, data_dir, tables))
    except SeedImportError as e:
        logger.error(e.message)
        return 1

    for table, rows in summary.items():
        logger.info(f"{table}: {rows} row(s) imported")
    return 0


if __name__ == "__main__":
    sys.exit(main())
