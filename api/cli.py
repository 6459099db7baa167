#!/usr/bin/env python3
"""CLI for Autogestion API management tasks.

Usage:
    python -m cli <command>

Commands:
    migrate            Run database migrations (alembic upgrade head)
    create-tables      Create missing tables straight from the models
    seed-permissions   Insert the default permissions if they are missing
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

DEFAULT_PERMISSIONS: dict[str, str] = {
    "read": "View records",
    "create": "Create records",
    "update": "Modify records",
    "delete": "Delete or deactivate records",
}


def get_alembic_config():
    from alembic.config import Config

    api_dir = Path(__file__).resolve().parent
    cfg = Config(str(api_dir / "alembic.ini"))
    # Absolute script_location so the command works from any working directory.
    cfg.set_main_option("script_location", str(api_dir / "alembic"))
    return cfg


def cmd_migrate(target: str = "head") -> int:
    """Run database migrations."""
    from alembic import command

    logger.info("Running database migrations...")
    command.upgrade(get_alembic_config(), target)
    logger.info("Migrations complete")
    return 0


async def _create_tables() -> None:
    from core.database import create_engine, create_tables, dispose_engine

    engine = create_engine()
    try:
        await create_tables(engine)
    finally:
        await dispose_engine(engine)


def cmd_create_tables() -> int:
    """Create missing tables from the models (does not alter existing ones)."""
    logger.info("Creating database tables...")
    asyncio.run(_create_tables())
    logger.info("Tables created successfully")
    return 0


async def seed_permissions(session_maker) -> list[str]:
    """Insert each default permission whose name is not taken yet.

    Returns:
        Names of the permissions that were inserted.
    """
    from models import Permission
    from repositories.permission_repository import PermissionRepository

    inserted: list[str] = []
    async with session_maker() as session:
        repository = PermissionRepository(session)
        for name, description in DEFAULT_PERMISSIONS.items():
            if await repository.get_by_name(name) is not None:
                continue
            await repository.create(Permission(name=name, description=description))
            inserted.append(name)
        await session.commit()
    return inserted


async def _seed_permissions() -> list[str]:
    from core.database import create_engine, create_session_maker, dispose_engine

    engine = create_engine()
    try:
        return await seed_permissions(create_session_maker(engine))
    finally:
        await dispose_engine(engine)


def cmd_seed_permissions() -> int:
    """Insert the default read/create/update/delete permissions."""
    inserted = asyncio.run(_seed_permissions())
    if inserted:
        logger.info(f"Inserted permissions: {', '.join(inserted)}")
    else:
        logger.info("Default permissions already present")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Autogestion API CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    migrate = subparsers.add_parser("migrate", help="Run database migrations")
    migrate.add_argument(
        "target",
        nargs="?",
        default="head",
        help="Target revision (default: head)",
    )
    subparsers.add_parser(
        "create-tables",
        help="Create missing tables from the models",
    )
    subparsers.add_parser(
        "seed-permissions",
        help="Insert the default read/create/update/delete permissions",
    )

    args = parser.parse_args(argv)

    if args.command == "migrate":
        return cmd_migrate(args.target)
    elif args.command == "create-tables":
        return cmd_create_tables()
    elif args.command == "seed-permissions":
        return cmd_seed_permissions()
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
