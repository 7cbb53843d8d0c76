import logging
import os
from databases import Database
from dotenv import load_dotenv
from userservice.modules.migration_runner import run_migrations

load_dotenv()

logger = logging.getLogger("userservice.database")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./users.db")

# Create the database instance
database = Database(DATABASE_URL)

async def connect_to_db():
    await database.connect()
    logger.info(f"Connected to database: {database.url.scheme}")

async def disconnect_from_db():
    await database.disconnect()

async def init_db():
    # Schema lives in userservice/migrations; applying them is idempotent.
    await run_migrations(database)
