"""
Application configuration via pydantic-settings.

Loads values from .env file with sensible defaults for local development.
Use ``get_settings()`` to obtain the cached singleton instance.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Caravan Weigh application settings loaded from environment / .env file.

    All settings can be overridden via environment variables or a `.env` file.
    Field names map directly to env var names (case-insensitive).

    Attributes:
        check_number_prefix: Prefix of auto-generated check numbers.
        check_number_length: Number of random characters after the prefix.
        relay_dismiss_seconds: Lifetime of the relay notification.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Silently ignore unrecognized env vars
    )

    # --- Page ---
    app_title: str = "Caravan Weigh"
    app_tagline: str = "CAMELS • CARGO • CONTROL"

    # --- Check numbers ---
    # Used when the operator leaves the check number blank on save
    check_number_prefix: str = "CHK-"
    check_number_length: int = 6
    check_number_max_attempts: int = 20  # Retries to avoid an existing check number

    # --- Notifications ---
    relay_dismiss_seconds: float = 4.5

    # --- Application ---
    log_level: str = "INFO"  # Python logging level


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings singleton.

    Uses ``functools.lru_cache`` so the .env file is read only once.
    Subsequent calls return the same ``Settings`` instance.

    Returns:
        Settings: The application-wide configuration object.
    """
    return Settings()
