# runway/core/config.py

from pathlib import Path
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Get the project root directory (where .env should be located)
BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding='utf-8',
        case_sensitive=True,
        extra="ignore"
    )

    # App Configuration
    APP_NAME: str = "Startup Runway API"
    DEBUG: bool = False
    VERSION: str = "0.1.0"

    # Database Configuration
    DATABASE_URL: str = "sqlite+aiosqlite:///./runway.db"

    # JWT / Security Configuration
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 1440

    # CORS Configuration
    FRONTEND_URL: str = "http://localhost:5173"

    # Transactions listing
    DEFAULT_TRANSACTION_LIMIT: int = 50

    # Simulated bank connection
    SIMULATED_HISTORY_DAYS: int = 90

    # Optional: Environment
    ENVIRONMENT: str = "development"

    @field_validator("DATABASE_URL")
    @classmethod
    def use_async_driver(cls, value: str) -> str:
        # Hosted Postgres URLs usually come without the async driver
        if value.startswith("postgres://"):
            value = value.replace("postgres://", "postgresql://", 1)
        if value.startswith("postgresql://"):
            value = value.replace("postgresql://", "postgresql+asyncpg://", 1)
        return value

    @property
    def is_sqlite(self) -> bool:
        """Check if we're running against a local SQLite file or memory db"""
        return self.DATABASE_URL.startswith("sqlite")

# Create a global settings instance
settings = Settings()
