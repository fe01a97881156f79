"""
Utilities Module

Configuration management, logging, Sentry integration and Prometheus metrics
shared by the API layer.
"""

from kaiascan.utils.config import get_config
from kaiascan.utils.logger import get_logger
from kaiascan.utils.sentry import (
    init_sentry,
    capture_exception,
    add_breadcrumb,
    close_sentry
)
from kaiascan.utils.metrics import record_request

__all__ = [
    'get_config',
    'get_logger',
    'init_sentry',
    'capture_exception',
    'add_breadcrumb',
    'close_sentry',
    'record_request'
]
