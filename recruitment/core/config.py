"""Application configuration management."""

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = "sqlite+aiosqlite:///./recruitment.db"
    database_echo: bool = False

    # Security
    session_secret: str = Field(
        default="change-me",
        description="Secret used to sign the session cookie",
    )
    session_max_age: int = Field(default=60 * 60 * 8, ge=60)
    cookie_secure: bool = Field(
        default=True,
        description="Set to False for local HTTP development",
    )
    cors_origins: list[str] = Field(
        default_factory=list,
        description="Origins allowed to make credentialed cross-site requests",
    )

    # Recruiter listing
    page_size: int = Field(default=10, ge=1, le=100)

    # Reference data
    seed_reference_data: bool = True
    seed_competences: list[str] = Field(
        default_factory=lambda: [
            "ticket sales",
            "lotteries",
            "roller coaster operation",
        ]
    )

    log_level: str = "INFO"

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
