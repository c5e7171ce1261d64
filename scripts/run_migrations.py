#!/usr/bin/env python3
"""Apply (or print) Alembic migrations for the forum schema.

    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py --sql      # print the SQL instead
    python scripts/run_migrations.py 3f1c2a9d7b40
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from forum.config import Settings
from forum.util.observability import configure_logfire


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("revision", nargs="?", default="head")
    parser.add_argument(
        "--sql", action="store_true", help="emit SQL without touching the database"
    )
    parser.add_argument("--config", default="alembic.ini")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logfire(Settings())

    with logfire.span("alembic upgrade {revision}", revision=args.revision, sql=args.sql):
        try:
            command.upgrade(Config(args.config), args.revision, sql=args.sql)
        except Exception:
            # Non-zero exit keeps the deploy from starting on a stale schema
            logfire.exception("Migration to {revision} failed", revision=args.revision)
            raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
