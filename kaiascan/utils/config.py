"""
config.py

This module contains the SDK configuration loaded from environment variables.
It centralizes the knobs shared by the transport, logging, Sentry and metrics
layers.

The network selection is intentionally not part of this module: it is chosen
programmatically through ``kaiascan.api.networks.configure_sdk`` or by passing
a profile to ``KaiascanClient``.
"""

import os
from typing import Any, Dict


class Config:
    """
    Configuration class that loads all settings from environment variables.

    Attributes:
        REQUEST_TIMEOUT (int): Default timeout for HTTP requests in seconds.
        ENVIRONMENT (str): The application environment (e.g., 'development', 'production').
        LOG_LEVEL (str): The logging level for the SDK loggers.
        LOG_FILE (str): Optional path of a log file; empty disables file logging.
        METRICS_ENABLED (bool): Whether Prometheus metrics are recorded.
        SENTRY_DSN (str): The DSN for Sentry error tracking.
        SENTRY_ENABLED (bool): A flag to enable or disable Sentry.
        SENTRY_ENVIRONMENT (str): The Sentry environment.
        SENTRY_TRACES_SAMPLE_RATE (float): The traces sample rate for Sentry.
    """

    def __init__(self):
        """
        Initializes the configuration from environment variables.
        """
        # Request Configuration
        self.REQUEST_TIMEOUT = int(os.getenv("KAIASCAN_REQUEST_TIMEOUT", "10"))

        # Environment Settings
        self.ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
        self.LOG_FILE = os.getenv("LOG_FILE", "")

        # Metrics Configuration
        self.METRICS_ENABLED = os.getenv("METRICS_ENABLED", "true").lower() == "true"

        # Sentry Configuration
        self.SENTRY_DSN = os.getenv("SENTRY_DSN", "")
        self.SENTRY_ENABLED = os.getenv("SENTRY_ENABLED", "false").lower() == "true"
        self.SENTRY_ENVIRONMENT = os.getenv("SENTRY_ENVIRONMENT", self.ENVIRONMENT)
        self.SENTRY_TRACES_SAMPLE_RATE = float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "1.0"))

    def validate(self) -> bool:
        """
        Validates the configuration values.

        Returns:
            bool: True if the configuration is valid.

        Raises:
            ValueError: If one or more values are invalid. All problems are
                reported in a single message.
        """
        errors = []

        if self.REQUEST_TIMEOUT <= 0:
            errors.append("KAIASCAN_REQUEST_TIMEOUT must be positive")

        if not 0.0 <= self.SENTRY_TRACES_SAMPLE_RATE <= 1.0:
            errors.append("SENTRY_TRACES_SAMPLE_RATE must be between 0.0 and 1.0")

        if self.SENTRY_ENABLED and not self.SENTRY_DSN:
            errors.append("SENTRY_DSN is required when SENTRY_ENABLED is true")

        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        return True

    def to_dict(self) -> Dict[str, Any]:
        """
        Converts the configuration to a dictionary.

        Returns:
            Dict[str, Any]: A dictionary containing all public configuration values.
        """
        return {
            key: value
            for key, value in self.__dict__.items()
            if not key.startswith("_")
        }


# Global configuration instance
_config = None


def get_config() -> Config:
    """
    Gets the global configuration instance.

    The configuration is loaded on the first call and the same instance is
    returned afterwards.

    Returns:
        Config: The global configuration object.
    """
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Drops the cached configuration so the next ``get_config`` re-reads the environment."""
    global _config
    _config = None
