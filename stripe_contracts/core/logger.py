import logging
from logging.handlers import RotatingFileHandler
import os

import sentry_sdk
from sentry_sdk.integrations.asyncio import AsyncioIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

# Track if Sentry has been initialized (global singleton)
_sentry_initialized = False


def init_sentry(
    dsn: str,
    environment: str = "development",
    traces_sample_rate: float = 1.0,
) -> bool:
    """
    Initialize Sentry SDK globally (should be called once at startup).

    Sentry SDK is a global singleton, so repeated calls are no-ops.

    Args:
        dsn (str): Sentry DSN for error tracking. Empty disables Sentry.
        environment (str): Sentry environment name (development/production).
        traces_sample_rate (float): Performance monitoring sample rate (0.0 to 1.0).

    Returns:
        bool: True if Sentry was initialized, False if already initialized or no DSN.
    """
    global _sentry_initialized

    if _sentry_initialized:
        return False

    if not dsn:
        return False

    # Stripe failures are logged at ERROR, so they become Sentry events
    sentry_logging = LoggingIntegration(
        level=logging.INFO,
        event_level=logging.ERROR,
    )

    sentry_sdk.init(
        dsn=dsn,
        environment=environment,
        traces_sample_rate=traces_sample_rate,
        integrations=[sentry_logging, AsyncioIntegration()],
    )

    _sentry_initialized = True
    return True


def setup_logger(
    name: str,
    log_file: str | None = None,
    level: int = logging.INFO,
    sentry_tag: str | None = None,
) -> logging.Logger:
    """
    Sets up a logger with a specified name, optional log file, and logging level.
    This function configures a logger to write log messages to the console and,
    when ``log_file`` is given, to a rotating file as well. The log messages will
    include the timestamp, logger name, log level, and message.

    Calling it again for the same name returns the already configured logger
    without attaching a second set of handlers.

    Args:
        name (str): The name of the logger.
        log_file (str, optional): The file path where the log messages will be
            written. Defaults to None (console only).
        level (int, optional): The logging level. Defaults to logging.INFO.
        sentry_tag (str, optional): Tag to identify this component in Sentry
            (e.g., "stripe", "cli"). Ignored until init_sentry() has run.

    Returns:
        logging.Logger: The configured logger instance.
    """
    if sentry_tag and _sentry_initialized:
        sentry_sdk.set_tag("component", sentry_tag)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    # Define the log format
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    handlers: list[logging.Handler] = []
    # File handler (with rotation)
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    # Add handlers to the logger
    for handler in handlers:
        logger.addHandler(handler)

    return logger
