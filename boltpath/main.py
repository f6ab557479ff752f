# /boltpath/main.py

# --- Core FastAPI Imports ---
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# --- Application-specific Router Imports ---
from .routers import (
    assignments_router,
    dashboard_router,
    progress_router,
    session_router,
    students_router,
)

# --- Configuration and Startup Imports ---
from .core import config
from .core.logging_config import configure_logging
from .services.mock_data import build_seeded_store
from .services.roster_store import RosterStore

logger = logging.getLogger(__name__)


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # One store per running application; restarting discards all state.
    configure_logging(config.LOG_LEVEL)
    app.state.roster_store = build_seeded_store() if config.SEED_MOCK_DATA else RosterStore()
    logger.info(
        "Roster store ready with %d student(s) and %d assignment(s)",
        len(app.state.roster_store.students), len(app.state.roster_store.assignments),
    )
    yield


# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="boltpath API",
    description="Student learning profiles and problem-based-learning assignments for teachers.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- API Router Inclusion ---
app.include_router(session_router.router, prefix="/api/session", tags=["Session"])
app.include_router(dashboard_router.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(students_router.router, prefix="/api/students", tags=["Students"])
app.include_router(assignments_router.router, prefix="/api/assignments", tags=["Assignments"])
app.include_router(progress_router.router, prefix="/api/progress", tags=["Progress"])


# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "boltpath backend is running!", "version": app.version}
