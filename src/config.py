"""Configuration management for the application."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_host: str
    database_port: int
    database_user: str
    database_password: str
    database_name: str
    database_sslmode: str = Field(default="prefer")
    database_pool_size: int = Field(default=5)
    database_max_overflow: int = Field(default=10)

    # JWT
    jwt_secret: str
    jwt_algorithm: str = Field(default="HS256")
    jwt_expiration_minutes: int = Field(default=10080)  # 7 days

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)
    cors_allow_origins: list[str] = Field(default=["*"])
    log_level: str = Field(default="INFO")

    # Behaviour
    public_product_reads: bool = Field(default=False)
    create_tables_on_startup: bool = Field(default=True)

    # API
    environment: str = Field(default="development")

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.environment == "production" and len(self.jwt_secret) < 32:
            raise ValueError("JWT_SECRET must be at least 32 characters in production")
        return self

    @property
    def database_url(self) -> URL:
        """SQLAlchemy URL assembled from the individual connection settings."""
        return URL.create(
            "postgresql+psycopg2",
            username=self.database_user,
            password=self.database_password,
            host=self.database_host,
            port=self.database_port,
            database=self.database_name,
            query={"sslmode": self.database_sslmode},
        )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
