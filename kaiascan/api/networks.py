"""
Network profiles and the process-wide network selector.

The selector is a plain module global: a single writer that is expected to run
once at start-up, before requests are issued from several threads. Changing it
while other threads are building requests is a race. Code that needs several
networks at once should pin a profile per client instead:

    client = KaiascanClient(network=TESTNET)
"""

from dataclasses import dataclass

from kaiascan.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class NetworkProfile:
    """A deployment of the explorer API: base URL plus chain id."""

    name: str
    base_url: str
    chain_id: str


MAINNET = NetworkProfile(
    name="mainnet",
    base_url="https://mainnet-oapi.kaiascan.io/",
    chain_id="8217",
)

TESTNET = NetworkProfile(
    name="kairos",
    base_url="https://kairos-oapi.kaiascan.io/",
    chain_id="1001",
)

_current = MAINNET


def current_network() -> NetworkProfile:
    """Returns the profile used by clients that were not given one explicitly."""
    return _current


def select_network(profile: NetworkProfile) -> NetworkProfile:
    """
    Makes ``profile`` the process-wide default.

    Takes effect for every request built afterwards; requests already in
    flight keep the URL they were built with.

    :param profile: The profile to select.
    :return: The previously selected profile.
    """
    global _current
    if not isinstance(profile, NetworkProfile):
        raise TypeError(f"Expected NetworkProfile, got {type(profile).__name__}")

    previous = _current
    _current = profile
    logger.debug(f"Kaiascan network set to {profile.name} (chain id {profile.chain_id})")
    return previous


def configure_sdk(is_testnet: bool) -> NetworkProfile:
    """
    Switches the process-wide default between mainnet and the Kairos testnet.

    :param is_testnet: True selects Kairos, False selects mainnet.
    :return: The newly selected profile.
    """
    profile = TESTNET if is_testnet else MAINNET
    select_network(profile)
    return profile
