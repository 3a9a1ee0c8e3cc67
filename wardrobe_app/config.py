"""
Configuration management for the wardrobe backend
"""
import os
from typing import List
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Application settings and configuration"""

    # Database Configuration
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./wardrobe.db")

    # Deployment environment (development / production)
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")

    # Frontend URL (for CORS)
    FRONTEND_URL: str = os.getenv("FRONTEND_URL", "http://localhost:3000")
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "wardrobe-api")

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() in ("development", "dev", "local")

    @property
    def SQL_ECHO(self) -> bool:
        """Echo SQL statements; defaults to on in development like a query log"""
        raw = os.getenv("SQL_ECHO")
        if raw is None:
            return self.is_development
        return raw.lower() == "true"

    @property
    def database_url(self) -> str:
        # Render/Heroku style URLs use postgres:// which SQLAlchemy no longer accepts
        url = self.DATABASE_URL
        if url.startswith("postgres://"):
            url = url.replace("postgres://", "postgresql://", 1)
        return url

    @property
    def allowed_origins(self) -> List[str]:
        """Prefer comma-separated CORS_ORIGINS, otherwise fall back to FRONTEND_URL"""
        if self.CORS_ORIGINS:
            return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]
        return [
            "http://localhost:3000",
            "http://localhost:3001",
            self.FRONTEND_URL,
        ]


settings = Settings()
