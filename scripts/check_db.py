"""Database connectivity check (CLI-invokable).

Usage:
    python -m scripts.check_db

Runs ``SELECT 1`` against POSTGRES_URL through the application's engine.

Exit codes:
    0  connection succeeded
    1  connection failed (details in the postgres_ping_failed log event)
"""

from __future__ import annotations

import asyncio
import sys


async def check_connection() -> bool:
    """Return True when the configured database answers SELECT 1."""
    # Late imports so module-level code doesn't trigger config loading
    # when just importing the module (e.g., for testing)
    from translation_api.db.postgres import close_postgres, ping_postgres

    try:
        return await ping_postgres()
    finally:
        await close_postgres()


def main() -> int:
    ok = asyncio.run(check_connection())
    if ok:
        print("Database connection successful.")
        return 0
    print("Database connection failed.", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
