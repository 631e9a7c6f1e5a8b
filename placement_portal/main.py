"""
Placement Portal - Main Application

FastAPI backend with:
- MongoDB for companies and admin accounts
- JWT authentication (opt-in per route)

Run: uvicorn placement_portal.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError

from placement_portal import __version__
from placement_portal.api.routes import api_router
from placement_portal.core.config import get_settings
from placement_portal.core.errors import register_exception_handlers
from placement_portal.core.logging import configure_logging
from placement_portal.db.mongodb import init_mongo_indexes, close_mongo_client, test_mongo_connection

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    try:
        init_mongo_indexes()
        logger.info("MongoDB indexes initialized")
    except PyMongoError as e:
        logger.warning("MongoDB index initialization failed: %s", e)

    yield

    close_mongo_client()
    logger.info("MongoDB client closed")


# Create FastAPI app
app = FastAPI(
    title="Placement Portal",
    description="""
    REST backend for campus placement management.

    ## Features
    - **Companies**: List, create, look up, update and remove recruiters
    - **Admins**: Register and login placement-cell accounts
    - **Authentication**: JWT bearer tokens, attached per route

    ## Database
    - MongoDB: companies, admins
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/health", tags=["Health"])
def health_check():
    """Report whether MongoDB answers a ping."""
    return {
        "status": "healthy",
        "mongodb": "connected" if test_mongo_connection() else "disconnected"
    }
