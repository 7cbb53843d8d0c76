import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from userservice.modules.database import connect_to_db, disconnect_from_db, init_db
from userservice.modules.error_middleware import GlobalExceptionMiddleware
from userservice.modules.logging_config import configure_logging
from userservice.modules.system_endpoints import router as system_router
from userservice.modules.users.api import user_router

logger = configure_logging()

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await connect_to_db()
    # Creates the schema when missing; migrations are idempotent.
    await init_db()
    logger.info("User service started")
    yield
    # Shutdown
    await disconnect_from_db()

app = FastAPI(title="User Service", version="0.1.0", lifespan=lifespan)

# CORS Configuration
origins = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(GlobalExceptionMiddleware)

# Include Routers
app.include_router(user_router)
app.include_router(system_router)

@app.get("/")
async def root():
    return {"status": "online", "system": "User Service"}
