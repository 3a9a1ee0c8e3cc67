import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .chat import RoomRegistry
from .chat import router as chat_router
from .config import settings
from .core.exceptions import register_exception_handlers
from .database import Base, engine
from .routers import collections, health, recommendations, wardrobe

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Create database tables
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="Wardrobe API",
    description="Wardrobe management with rule-based outfit and purchase recommendations",
    version="1.0.0",
)

# CORS configuration: anything goes outside production
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins if settings.ENVIRONMENT == "production" else ["*"],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type"],
)

register_exception_handlers(app)

app.state.chat_rooms = RoomRegistry()

# Include routers
app.include_router(health.router)
app.include_router(wardrobe.router, prefix="/wardrobe", tags=["wardrobe"])
app.include_router(collections.router, prefix="/collections", tags=["collections"])
app.include_router(recommendations.router)
app.include_router(chat_router)


@app.on_event("startup")
async def log_startup() -> None:
    logger.info(f"🚀 Wardrobe API starting (environment={settings.ENVIRONMENT})")


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Welcome to the Wardrobe API",
        "version": app.version,
        "docs": "/docs",
    }
