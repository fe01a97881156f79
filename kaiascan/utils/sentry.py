"""
sentry.py

Optional Sentry integration for the SDK. The client records a breadcrumb for
every request it sends and forwards transport failures here. Nothing is sent
unless ``init_sentry`` was called with Sentry enabled in the configuration.
"""

from typing import Optional

import sentry_sdk

from kaiascan import __version__
from kaiascan.utils.config import get_config
from kaiascan.utils.logger import get_logger

logger = get_logger(__name__)

# Global flag to track if Sentry is initialized
_sentry_initialized = False


def init_sentry() -> bool:
    """
    Initializes the Sentry SDK for error tracking.

    Sentry is not initialized when it is disabled in the configuration or when
    no DSN is provided.

    Returns:
        bool: True if Sentry was successfully initialized, False otherwise.
    """
    global _sentry_initialized

    if _sentry_initialized:
        logger.info("Sentry already initialized")
        return True

    config = get_config()

    if not config.SENTRY_ENABLED:
        logger.info("Sentry is disabled via configuration")
        return False

    if not config.SENTRY_DSN:
        logger.warning("Sentry is enabled but DSN is not configured")
        return False

    try:
        sentry_sdk.init(
            dsn=config.SENTRY_DSN,
            environment=config.SENTRY_ENVIRONMENT,
            traces_sample_rate=config.SENTRY_TRACES_SAMPLE_RATE,
            release=f"kaiascan@{__version__}",
            attach_stacktrace=True,
            send_default_pii=False,
        )
        _sentry_initialized = True
        logger.info(f"Sentry initialized for environment: {config.SENTRY_ENVIRONMENT}")
        return True
    except Exception as e:
        logger.error(f"Failed to initialize Sentry: {e}")
        return False


def capture_exception(error: Exception, context: Optional[dict] = None) -> Optional[str]:
    """
    Captures an exception and sends it to Sentry.

    Args:
        error (Exception): The exception to capture.
        context (Optional[dict]): Extra context blocks keyed by name.

    Returns:
        Optional[str]: The Sentry event ID, or None when nothing was sent.
    """
    if not _sentry_initialized:
        logger.debug("Sentry not initialized, skipping exception capture")
        return None

    try:
        if context:
            with sentry_sdk.new_scope() as scope:
                for key, value in context.items():
                    scope.set_context(key, value)
                event_id = sentry_sdk.capture_exception(error)
        else:
            event_id = sentry_sdk.capture_exception(error)

        logger.debug(f"Exception captured by Sentry with event ID: {event_id}")
        return event_id
    except Exception as e:
        logger.error(f"Failed to capture exception in Sentry: {e}")
        return None


def add_breadcrumb(message: str, category: str = 'kaiascan',
                   level: str = 'info', data: Optional[dict] = None) -> None:
    """
    Adds a breadcrumb to Sentry for better error context.

    Args:
        message (str): The breadcrumb message.
        category (str): The category of the breadcrumb.
        level (str): The severity level of the breadcrumb.
        data (Optional[dict]): Additional structured data.
    """
    if not _sentry_initialized:
        return

    try:
        sentry_sdk.add_breadcrumb(
            message=message,
            category=category,
            level=level,
            data=data or {}
        )
    except Exception as e:
        logger.error(f"Failed to add breadcrumb in Sentry: {e}")


def close_sentry(timeout: int = 2) -> None:
    """
    Flushes pending events and marks Sentry as closed.

    Args:
        timeout (int): Seconds to wait for pending events to be sent.
    """
    global _sentry_initialized

    if not _sentry_initialized:
        logger.debug("Sentry not initialized, nothing to close")
        return

    try:
        sentry_sdk.flush(timeout=timeout)
        _sentry_initialized = False
        logger.info("Sentry client closed")
    except Exception as e:
        logger.error(f"Failed to close Sentry client: {e}")
