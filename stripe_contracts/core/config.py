from functools import lru_cache
import logging
import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from stripe_contracts.core.logger import init_sentry, setup_logger


class Settings(BaseSettings):
    # Application settings
    ENVIRONMENT: str = "development"  # Options: development, test, production
    APP_NAME: str = "stripe-contracts"
    APP_VERSION: str = "0.1.0"

    # Stripe settings
    STRIPE_API_KEY: str = ""
    STRIPE_API_BASE_URL: str = "https://api.stripe.com"
    STRIPE_API_VERSION: str = "2019-11-05"
    STRIPE_TIMEOUT_SECONDS: float = 80.0

    # Logging settings
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = False

    # Sentry settings
    SENTRY_DSN: str = ""
    SENTRY_ENVIRONMENT: str = "development"
    SENTRY_TRACES_SAMPLE_RATE: float = 0.1

    model_config: SettingsConfigDict = SettingsConfigDict(  # type: ignore
        env_file=".env",
        extra="ignore",
    )

    @property
    def log_level(self) -> int:
        return logging.getLevelName(self.LOG_LEVEL.upper())


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

# Initialize Sentry once globally; a blank DSN leaves it disabled
init_sentry(
    dsn=settings.SENTRY_DSN,
    environment=settings.SENTRY_ENVIRONMENT,
    traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
)


def _log_file(name: str) -> str | None:
    if not settings.LOG_TO_FILE:
        return None
    return os.path.join(settings.LOG_DIR, f"{name}.log")


# Configure loggers
stripe_logger = setup_logger(
    name="stripe_logger",
    log_file=_log_file("stripe"),
    level=settings.log_level,
    sentry_tag="stripe",
)
cli_logger = setup_logger(
    name="cli_logger",
    log_file=_log_file("cli"),
    level=settings.log_level,
    sentry_tag="cli",
)

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "stripe_logger",
    "cli_logger",
]
