"""
kaiascan

Python SDK for the Kaiascan blockchain explorer API.

    import kaiascan

    kaiascan.configure_sdk(is_testnet=True)
    token = kaiascan.get_fungible_token("0x...")
    print(token.data.name)

Every endpoint is available as a method of ``KaiascanClient`` and, for
convenience, as a module-level function that uses a shared default client
following the process-wide network selector.
"""

__version__ = "0.1.0"

from kaiascan.api import (
    ENDPOINTS,
    MAINNET,
    TESTNET,
    ApiEnvelope,
    ApiError,
    DecodeError,
    KaiascanClient,
    KaiascanError,
    NetworkProfile,
    TokenInfo,
    Transport,
    TransportError,
    ValidationError,
    configure_sdk,
    current_network,
    get_default_client,
    select_network,
)

__all__ = [
    'KaiascanClient', 'get_default_client', 'Transport',
    'ApiEnvelope', 'TokenInfo', 'ENDPOINTS',
    'KaiascanError', 'ValidationError', 'TransportError', 'DecodeError', 'ApiError',
    'NetworkProfile', 'MAINNET', 'TESTNET', 'configure_sdk', 'current_network', 'select_network',
] + sorted(ENDPOINTS)


def __getattr__(name):
    # Module-level endpoint functions, e.g. kaiascan.get_block(1)
    if name in ENDPOINTS:
        return getattr(get_default_client(), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__():
    return sorted(set(globals()) | set(ENDPOINTS))
