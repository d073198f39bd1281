from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Response formatting settings loaded from environment variables.

    Pydantic Settings reads env vars prefixed with ``RESPONSE_UTILS_``
    (case-insensitive), e.g. ``RESPONSE_UTILS_DEFAULT_PAGE_SIZE=50``.
    In development, it also reads from .env file if present.
    """

    # Page size used when a caller passes a non-positive page_size
    default_page_size: int = Field(default=20, ge=1)

    # Message returned to clients for exceptions that are not ResponseError.
    # The original exception text still goes into details.error.
    unexpected_error_message: str = "An unexpected error occurred"

    model_config = SettingsConfigDict(
        env_prefix="RESPONSE_UTILS_",
        env_file=".env",  # Load from .env in development
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


settings = Settings()
