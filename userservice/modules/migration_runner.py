import os
import logging
from databases import Database

logger = logging.getLogger("userservice.migrations")

MIGRATION_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "migrations")

async def run_migrations(database: Database, migration_dir: str = MIGRATION_DIR):
    """
    Scans userservice/migrations for .sql files and executes them.
    A simple forward-only migration runner; every statement must be
    safe to re-run (IF NOT EXISTS).
    """
    # Ensure connected (caller responsible, or we check)
    if not database.is_connected:
        await database.connect()

    files = sorted([f for f in os.listdir(migration_dir) if f.endswith(".sql")])

    logger.info(f"Found {len(files)} migration files.")

    for filename in files:
        filepath = os.path.join(migration_dir, filename)
        logger.info(f"Applying migration: {filename}")

        with open(filepath, "r") as f:
            sql = f.read()

        # Split by ';' if multiple statements exist, roughly
        statements = [s.strip() for s in sql.split(";") if s.strip()]

        async with database.transaction():
            for stmt in statements:
                await database.execute(stmt)

    logger.info("All migrations applied successfully.")
    return files
