"""
API Module

Client, endpoint catalog, request building, transport and envelope decoding
for the Kaiascan explorer API.
"""

from kaiascan.api.client import KaiascanClient, get_default_client
from kaiascan.api.endpoints import ENDPOINTS, Endpoint, Param, get_endpoint
from kaiascan.api.envelope import ApiEnvelope, decode_envelope
from kaiascan.api.errors import ApiError, DecodeError, KaiascanError, TransportError, ValidationError
from kaiascan.api.models import TokenInfo
from kaiascan.api.networks import (
    MAINNET,
    TESTNET,
    NetworkProfile,
    configure_sdk,
    current_network,
    select_network,
)
from kaiascan.api.request_builder import RequestSpec, build_request, build_url, parse_query
from kaiascan.api.transport import Transport

__all__ = [
    'KaiascanClient', 'get_default_client',
    'ENDPOINTS', 'Endpoint', 'Param', 'get_endpoint',
    'ApiEnvelope', 'decode_envelope',
    'KaiascanError', 'ValidationError', 'TransportError', 'DecodeError', 'ApiError',
    'TokenInfo',
    'NetworkProfile', 'MAINNET', 'TESTNET', 'configure_sdk', 'current_network', 'select_network',
    'RequestSpec', 'build_request', 'build_url', 'parse_query',
    'Transport',
]
