"""
EventHub GraphQL API - Main Application Entry Point

Events, users and bookings served through a single GraphQL endpoint:
- MongoDB document store accessed through per-collection stores
- bcrypt password hashing and JWT session tokens
- Request-scoped DataLoaders for the relations between entities
- Structured logging with request correlation
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError

from eventhub.core.config import get_settings
from eventhub.core.logging import setup_logging, get_logger
from eventhub.api.router import api_router
from eventhub.api.middleware import AuthGateMiddleware, RequestLoggingMiddleware
from eventhub.graphql.schema import validate_schema
from eventhub.infrastructure import MongoClient, get_database
from eventhub.stores import ensure_indexes

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: startup and shutdown hooks."""
    setup_logging()
    logger = get_logger(__name__)

    logger.info(
        "application_starting",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
    )

    validate_schema()

    # A store that is down at startup is logged, not fatal; the client keeps
    # trying on its own and requests fail until it is reachable.
    database = get_database()
    try:
        await database.client.admin.command("ping")
        await ensure_indexes(database)
        logger.info("mongodb_connected", database=settings.MONGODB_DB)
    except PyMongoError as e:
        logger.error("mongodb_unavailable", error=str(e), url=settings.MONGODB_URL)

    yield

    await MongoClient.close()
    logger.info("application_shutdown")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="GraphQL API for events, users and bookings",
    lifespan=lifespan,
    debug=settings.DEBUG,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Custom middleware (last added runs first)
app.add_middleware(AuthGateMiddleware)
app.add_middleware(RequestLoggingMiddleware)

# Routes
app.include_router(api_router)


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint for Docker and load balancers."""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
    }


@app.get("/", tags=["Root"])
async def root():
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "graphql": "/graphql",
    }


def run() -> None:
    import uvicorn

    uvicorn.run(
        "eventhub.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
