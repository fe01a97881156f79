"""
client.py

``KaiascanClient`` runs every catalog operation through one generic path:
validate the arguments, build the URL, send a single GET and decode the
envelope. Named methods are thin wrappers over ``call``.

A client created with an explicit ``network`` is pinned to it. A client
created without one reads the process-wide selector each time a request is
built, so ``configure_sdk`` affects its next call but never a request that is
already in flight.
"""

import time
from typing import Any, List, Optional

from kaiascan.api.endpoints import Endpoint, get_endpoint
from kaiascan.api.envelope import ApiEnvelope, decode_envelope
from kaiascan.api.errors import ApiError, DecodeError, TransportError, ValidationError
from kaiascan.api.networks import NetworkProfile, current_network
from kaiascan.api.transport import Transport
from kaiascan.utils.logger import get_logger
from kaiascan.utils.metrics import record_request
from kaiascan.utils.sentry import add_breadcrumb, capture_exception

logger = get_logger(__name__)


class KaiascanClient:
    """
    Client for the Kaiascan explorer API.
    """

    def __init__(self, network: Optional[NetworkProfile] = None, timeout: Optional[float] = None,
                 transport: Optional[Transport] = None):
        """
        :param network: Network profile to pin this client to. None follows the
            process-wide selector.
        :param timeout: Per-request timeout in seconds. None uses the transport default.
        :param transport: Transport to share with other clients. A client only
            closes the transport it created itself.
        :raises ValueError: If the timeout is not positive.
        """
        if timeout is not None and timeout <= 0:
            raise ValueError("timeout must be positive")

        self._network = network
        self.timeout = timeout
        self._owns_transport = transport is None
        self.transport = transport if transport is not None else Transport()

    @property
    def network(self) -> NetworkProfile:
        """The profile the next request will be sent to."""
        return self._network if self._network is not None else current_network()

    @property
    def base_url(self) -> str:
        return self.network.base_url

    @property
    def chain_id(self) -> str:
        return self.network.chain_id

    def with_timeout(self, timeout: float) -> "KaiascanClient":
        """
        Returns a client sharing this client's transport and network with a
        different timeout. Closing the returned client leaves the transport open.
        """
        return KaiascanClient(network=self._network, timeout=timeout, transport=self.transport)

    def close(self) -> None:
        """Closes the transport if this client created it."""
        if self._owns_transport:
            self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def build_url(self, name: str, **params: Any) -> str:
        """Validates ``params`` for endpoint ``name`` and returns the URL that would be requested."""
        return get_endpoint(name).build_url(self.base_url, params)

    def call(self, name: str, timeout: Optional[float] = None, **params: Any) -> ApiEnvelope:
        """
        Executes catalog operation ``name``.

        :param name: Operation name, e.g. ``get_block``.
        :param timeout: Timeout for this call only.
        :param params: Operation arguments.
        :return: The successful envelope.
        :raises ValidationError: If arguments are invalid; no request is sent.
        :raises TransportError: On connection failure, timeout or non-2xx status.
        :raises DecodeError: If the body is not a valid envelope.
        :raises ApiError: If the envelope carries a non-zero code.
        """
        return self.request(get_endpoint(name), params, timeout=timeout)

    def request(self, endpoint: Endpoint, params: dict, timeout: Optional[float] = None) -> ApiEnvelope:
        """Runs ``endpoint`` with ``params``. See ``call``."""
        try:
            url = endpoint.build_url(self.base_url, params)
        except ValidationError as err:
            logger.warning(f"Rejected {endpoint.name} call: {err}")
            record_request(endpoint.name, "validation_error")
            raise

        add_breadcrumb(f"GET {url}", data={"endpoint": endpoint.name})
        effective_timeout = timeout if timeout is not None else self.timeout

        started = time.monotonic()
        try:
            raw = self.transport.send(url, timeout=effective_timeout)
        except TransportError as err:
            record_request(endpoint.name, "transport_error", time.monotonic() - started)
            capture_exception(err, context={"request": {"endpoint": endpoint.name, "url": url,
                                                        "status_code": err.status_code}})
            raise
        duration = time.monotonic() - started

        try:
            envelope = decode_envelope(raw, endpoint.model)
        except DecodeError as err:
            logger.error(f"Could not decode {endpoint.name} response: {err}")
            record_request(endpoint.name, "decode_error", duration)
            raise
        except ApiError as err:
            logger.warning(f"{endpoint.name} failed with API error {err.code}: {err.message}")
            record_request(endpoint.name, "api_error", duration)
            raise

        record_request(endpoint.name, "success", duration)
        logger.debug(f"{endpoint.name} succeeded in {duration:.3f}s")
        return envelope

    # Tokens

    def get_fungible_token(self, token_address: str) -> ApiEnvelope:
        return self.call("get_fungible_token", token_address=token_address)

    def get_token_holders(self, token_address: str, page: int, size: int,
                          holder_address: Optional[str] = None) -> ApiEnvelope:
        return self.call("get_token_holders", token_address=token_address, page=page, size=size,
                         holder_address=holder_address)

    def get_token_burns(self, token_address: str, page: int, size: int,
                        block_number_start: Optional[int] = None,
                        block_number_end: Optional[int] = None) -> ApiEnvelope:
        return self.call("get_token_burns", token_address=token_address, page=page, size=size,
                         block_number_start=block_number_start, block_number_end=block_number_end)

    def get_token_transfers(self, token_address: str, page: int, size: int,
                            block_number_start: Optional[int] = None,
                            block_number_end: Optional[int] = None) -> ApiEnvelope:
        return self.call("get_token_transfers", token_address=token_address, page=page, size=size,
                         block_number_start=block_number_start, block_number_end=block_number_end)

    # NFTs

    def get_nft_item(self, nft_address: str, token_id: str) -> ApiEnvelope:
        return self.call("get_nft_item", nft_address=nft_address, token_id=token_id)

    def get_nft_info(self, token_address: str) -> ApiEnvelope:
        return self.call("get_nft_info", token_address=token_address)

    def get_nft_holders(self, token_address: str, page: int, size: int,
                        token_id: Optional[str] = None) -> ApiEnvelope:
        return self.call("get_nft_holders", token_address=token_address, page=page, size=size,
                         token_id=token_id)

    def get_nft_transfers(self, token_address: str, page: int, size: int,
                          token_id: Optional[str] = None,
                          block_number_start: Optional[int] = None,
                          block_number_end: Optional[int] = None) -> ApiEnvelope:
        return self.call("get_nft_transfers", token_address=token_address, page=page, size=size,
                         token_id=token_id, block_number_start=block_number_start,
                         block_number_end=block_number_end)

    def get_nft_inventories(self, token_address: str, page: int, size: int,
                            keyword: Optional[str] = None) -> ApiEnvelope:
        return self.call("get_nft_inventories", token_address=token_address, page=page, size=size,
                         keyword=keyword)

    # Blocks

    def get_latest_block(self) -> ApiEnvelope:
        return self.call("get_latest_block")

    def get_latest_block_burns(self, page: int, size: int) -> ApiEnvelope:
        return self.call("get_latest_block_burns", page=page, size=size)

    def get_latest_block_rewards(self, block_number: int) -> ApiEnvelope:
        return self.call("get_latest_block_rewards", block_number=block_number)

    def get_block(self, block_number: int) -> ApiEnvelope:
        return self.call("get_block", block_number=block_number)

    def get_blocks(self, block_number: int, block_number_start: Optional[int] = None,
                   block_number_end: Optional[int] = None, page: Optional[int] = None,
                   size: Optional[int] = None) -> ApiEnvelope:
        return self.call("get_blocks", block_number=block_number,
                         block_number_start=block_number_start, block_number_end=block_number_end,
                         page=page, size=size)

    def get_block_burns(self, block_number: int) -> ApiEnvelope:
        return self.call("get_block_burns", block_number=block_number)

    def get_block_rewards(self, block_number: int) -> ApiEnvelope:
        return self.call("get_block_rewards", block_number=block_number)

    def get_internal_transactions_of_block(self, block_number: int, page: int, size: int) -> ApiEnvelope:
        return self.call("get_internal_transactions_of_block", block_number=block_number,
                         page=page, size=size)

    def get_transactions_of_block(self, block_number: int, transaction_type: Optional[str] = None,
                                  page: Optional[int] = None, size: Optional[int] = None) -> ApiEnvelope:
        return self.call("get_transactions_of_block", block_number=block_number,
                         transaction_type=transaction_type, page=page, size=size)

    def get_blocks_by_timestamp(self, timestamp: int) -> ApiEnvelope:
        return self.call("get_blocks_by_timestamp", timestamp=timestamp)

    # Transactions

    def get_transaction(self, transaction_hash: str) -> ApiEnvelope:
        return self.call("get_transaction", transaction_hash=transaction_hash)

    def get_transaction_status(self, transaction_hash: str) -> ApiEnvelope:
        return self.call("get_transaction_status", transaction_hash=transaction_hash)

    def get_transaction_receipt_status(self, transaction_hash: str) -> ApiEnvelope:
        return self.call("get_transaction_receipt_status", transaction_hash=transaction_hash)

    def get_transaction_input_data(self, transaction_hash: str) -> ApiEnvelope:
        return self.call("get_transaction_input_data", transaction_hash=transaction_hash)

    def get_transaction_event_logs(self, transaction_hash: str, page: int, size: int,
                                   signature: Optional[str] = None) -> ApiEnvelope:
        return self.call("get_transaction_event_logs", transaction_hash=transaction_hash,
                         page=page, size=size, signature=signature)

    def get_transaction_internal_transactions(self, transaction_hash: str, page: int,
                                              size: int) -> ApiEnvelope:
        return self.call("get_transaction_internal_transactions", transaction_hash=transaction_hash,
                         page=page, size=size)

    def get_transaction_token_transfers(self, transaction_hash: str, page: int, size: int) -> ApiEnvelope:
        return self.call("get_transaction_token_transfers", transaction_hash=transaction_hash,
                         page=page, size=size)

    def get_transaction_nft_transfers(self, transaction_hash: str, page: int, size: int) -> ApiEnvelope:
        return self.call("get_transaction_nft_transfers", transaction_hash=transaction_hash,
                         page=page, size=size)

    # Contracts

    def get_contract_creation_code(self, contract_address: str) -> ApiEnvelope:
        return self.call("get_contract_creation_code", contract_address=contract_address)

    def get_contract_source_code(self, contract_address: str) -> ApiEnvelope:
        return self.call("get_contract_source_code", contract_address=contract_address)

    def get_contract_info(self, contract_address: str) -> ApiEnvelope:
        return self.call("get_contract_info", contract_address=contract_address)

    def get_contracts_info(self, contract_addresses: List[str]) -> ApiEnvelope:
        return self.call("get_contracts_info", contract_addresses=contract_addresses)

    def get_contract_abi(self, contract_address: str) -> ApiEnvelope:
        return self.call("get_contract_abi", contract_address=contract_address)

    # Accounts

    def get_account_info(self, account_address: str) -> ApiEnvelope:
        return self.call("get_account_info", account_address=account_address)

    def get_account_key_histories(self, account_address: str, page: int, size: int) -> ApiEnvelope:
        return self.call("get_account_key_histories", account_address=account_address,
                         page=page, size=size)

    def get_account_token_balances(self, account_address: str, page: int, size: int) -> ApiEnvelope:
        return self.call("get_account_token_balances", account_address=account_address,
                         page=page, size=size)

    def get_account_token_details(self, account_address: str, page: int, size: int) -> ApiEnvelope:
        return self.call("get_account_token_details", account_address=account_address,
                         page=page, size=size)

    def get_account_kip17_nft_balances(self, account_address: str, page: int, size: int) -> ApiEnvelope:
        return self.call("get_account_kip17_nft_balances", account_address=account_address,
                         page=page, size=size)

    def get_account_kip37_nft_balances(self, account_address: str, page: int, size: int) -> ApiEnvelope:
        return self.call("get_account_kip37_nft_balances", account_address=account_address,
                         page=page, size=size)

    def get_account_nft_transfers(self, account_address: str, page: int, size: int,
                                  contract_address: Optional[str] = None,
                                  block_number_start: Optional[int] = None,
                                  block_number_end: Optional[int] = None) -> ApiEnvelope:
        return self.call("get_account_nft_transfers", account_address=account_address,
                         page=page, size=size, contract_address=contract_address,
                         block_number_start=block_number_start, block_number_end=block_number_end)

    def get_account_token_transfers(self, account_address: str, page: int, size: int,
                                    contract_address: Optional[str] = None,
                                    block_number_start: Optional[int] = None,
                                    block_number_end: Optional[int] = None) -> ApiEnvelope:
        return self.call("get_account_token_transfers", account_address=account_address,
                         page=page, size=size, contract_address=contract_address,
                         block_number_start=block_number_start, block_number_end=block_number_end)

    def get_account_event_logs(self, account_address: str, page: int, size: int,
                               signature: Optional[str] = None,
                               block_number_start: Optional[int] = None,
                               block_number_end: Optional[int] = None) -> ApiEnvelope:
        return self.call("get_account_event_logs", account_address=account_address,
                         page=page, size=size, signature=signature,
                         block_number_start=block_number_start, block_number_end=block_number_end)

    def get_account_transactions(self, account_address: str, page: int, size: int,
                                 block_number_start: Optional[int] = None,
                                 block_number_end: Optional[int] = None,
                                 transaction_type: Optional[str] = None,
                                 directions: Optional[List[str]] = None) -> ApiEnvelope:
        return self.call("get_account_transactions", account_address=account_address,
                         page=page, size=size, block_number_start=block_number_start,
                         block_number_end=block_number_end, transaction_type=transaction_type,
                         directions=directions)

    def get_fee_paid_transactions(self, account_address: str, page: int, size: int,
                                  block_number_start: Optional[int] = None,
                                  block_number_end: Optional[int] = None,
                                  transaction_type: Optional[str] = None) -> ApiEnvelope:
        return self.call("get_fee_paid_transactions", account_address=account_address,
                         page=page, size=size, block_number_start=block_number_start,
                         block_number_end=block_number_end, transaction_type=transaction_type)


_default_client: Optional[KaiascanClient] = None


def get_default_client() -> KaiascanClient:
    """
    Returns the shared client used by the module-level functions.

    It follows the process-wide network selector.
    """
    global _default_client
    if _default_client is None:
        _default_client = KaiascanClient()
    return _default_client
