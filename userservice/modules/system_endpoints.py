import logging
from fastapi import APIRouter, HTTPException
from userservice.modules.database import database
from userservice.modules.migration_runner import run_migrations

logger = logging.getLogger("userservice.system")

router = APIRouter(tags=["System"])

@router.get("/health")
async def health():
    return {"status": "healthy"}

@router.post("/api/system/migrate")
async def trigger_migrations():
    """
    Manually checks and runs pending database migrations.
    Useful for production hooks (deploy jobs).
    """
    try:
        applied = await run_migrations(database)
        return {"status": "success", "message": "Database migrations applied.", "migrations": applied}
    except Exception as e:
        logger.error(f"[system_endpoints.trigger_migrations] ERROR: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Migration failed")
