"""Configuration management using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "change-me-in-production-use-env-var"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    host: str = "127.0.0.1"
    port: int = 3000
    database_path: str = ":memory:"
    api_prefix: str = "/api"
    cors_origins: list[str] = ["http://localhost:3000"]
    log_level: str = "INFO"

    # JWT Configuration
    jwt_secret_key: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    jwt_expiry_seconds: int = 3600

    # Bcrypt work factor (higher = more secure but slower)
    # For tests, use 4 for faster execution while maintaining functionality
    bcrypt_work_factor: int = 10

    # Registration responses carry the stored user record, hash included.
    # Set to False to strip the hash from the response.
    expose_password_hash: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False
    )

    @property
    def uses_default_secret(self) -> bool:
        return self.jwt_secret_key == DEFAULT_JWT_SECRET
