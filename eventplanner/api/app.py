"""FastAPI web application for eventplanner."""

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import Depends, FastAPI

from eventplanner.api.errors import register_exception_handlers
from eventplanner.api.routes import auth, events, users
from eventplanner.auth.dependencies import allow_anonymous, authenticate_request
from eventplanner.auth.jwt import get_jwt_settings
from eventplanner.database.database import init_db

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

APP_VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")
    # A missing JWT secret must stop startup, not fail the first login.
    get_jwt_settings()
    init_db()
    yield
    logger.info("Application shutting down...")


app = FastAPI(
    title="eventplanner API",
    description="Personal calendar events with conflict detection",
    version=APP_VERSION,
    lifespan=lifespan,
    dependencies=[Depends(authenticate_request)],
)

register_exception_handlers(app)

app.include_router(auth.router)
app.include_router(users.router)
app.include_router(events.router)


@app.get("/health")
@allow_anonymous
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": APP_VERSION}
