"""
endpoints.py

Declarative catalog of the Kaiascan explorer endpoints.

Each ``Endpoint`` names its path template, the parameters substituted into the
path, the query parameters (in the order they are sent) and, optionally, the
payload model. The client runs every operation through the same generic path:
validate, build the URL, send, decode. All endpoints use GET.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from kaiascan.api.errors import ValidationError
from kaiascan.api.models import TokenInfo
from kaiascan.api.request_builder import build_url, require, validate_page, validate_size

TOKENS = "api/v1/tokens"
NFTS = "api/v1/nfts"
BLOCKS = "api/v1/blocks"
TRANSACTIONS = "api/v1/transactions"
TRANSACTION_RECEIPTS = "api/v1/transaction-receipts"
CONTRACTS = "api/v1/contracts"
ACCOUNTS = "api/v1/accounts"

STR = "str"
INT = "int"
ID = "id"
LIST = "list"
PAGE = "page"
SIZE = "size"


@dataclass(frozen=True)
class Param:
    """
    A single endpoint argument.

    Attributes:
        name (str): Python keyword used by callers.
        wire (str): Placeholder name in the path template or query key.
        kind (str): One of ``str``, ``int``, ``id`` (str or int), ``list``, ``page``, ``size``.
        required (bool): Whether the argument must be supplied.
        minimum (Optional[int]): Lower bound for integer arguments.
    """
    name: str
    wire: str
    kind: str = STR
    required: bool = True
    minimum: Optional[int] = None

    def validate(self, value: Any) -> None:
        if value is None:
            if self.required:
                raise ValidationError(f"{self.name} is required")
            return

        if self.kind == PAGE:
            validate_page(value)
        elif self.kind == SIZE:
            validate_size(value)
        elif self.kind == INT:
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(f"{self.name} must be an integer")
            if self.minimum is not None and value < self.minimum:
                raise ValidationError(f"{self.name} must be >= {self.minimum}")
        elif self.kind == ID:
            if isinstance(value, bool) or not isinstance(value, (str, int)):
                raise ValidationError(f"{self.name} must be a string or an integer")
            require(self.name, value)
        elif self.kind == LIST:
            if isinstance(value, str) or not isinstance(value, (list, tuple)):
                raise ValidationError(f"{self.name} must be a list of strings")
            if self.required:
                require(self.name, value)
            for item in value:
                if not isinstance(item, str) or not item.strip():
                    raise ValidationError(f"{self.name} must contain non-empty strings")
        else:
            if not isinstance(value, str):
                raise ValidationError(f"{self.name} must be a string")
            require(self.name, value)


@dataclass(frozen=True)
class Endpoint:
    """An API operation: path template, parameters and payload model."""

    name: str
    path: str
    path_params: Tuple[Param, ...] = ()
    query_params: Tuple[Param, ...] = ()
    model: Any = None
    method: str = "GET"

    @property
    def params(self) -> Tuple[Param, ...]:
        return self.path_params + self.query_params

    def validate(self, arguments: Mapping[str, Any]) -> None:
        """
        Checks the caller's arguments against the declared parameters.

        :raises TypeError: On an argument the endpoint does not declare.
        :raises ValidationError: On a missing, empty or out-of-range argument.
        """
        known = {param.name for param in self.params}
        unknown = sorted(set(arguments) - known)
        if unknown:
            raise TypeError(f"{self.name}() got unexpected argument(s): {', '.join(unknown)}")

        for param in self.params:
            param.validate(arguments.get(param.name))

    def build_url(self, base_url: str, arguments: Mapping[str, Any]) -> str:
        """Validates ``arguments`` and returns the encoded request URL."""
        self.validate(arguments)
        path_args = {param.wire: arguments.get(param.name) for param in self.path_params}
        query_args = [(param.wire, arguments.get(param.name)) for param in self.query_params]
        return build_url(base_url, self.path, path_args, query_args)


def _str(name: str, wire: str, required: bool = True) -> Param:
    return Param(name, wire, STR, required)


def _int(name: str, wire: str, required: bool = True, minimum: Optional[int] = None) -> Param:
    return Param(name, wire, INT, required, minimum)


def _pagination(required: bool = True) -> Tuple[Param, Param]:
    return Param("page", "page", PAGE, required), Param("size", "size", SIZE, required)


def _block_range() -> Tuple[Param, Param]:
    return (
        _int("block_number_start", "blockNumberStart", required=False, minimum=0),
        _int("block_number_end", "blockNumberEnd", required=False, minimum=0),
    )


TOKEN_ADDRESS = _str("token_address", "tokenAddress")
NFT_ADDRESS = _str("nft_address", "nftAddress")
TOKEN_ID = Param("token_id", "tokenId", ID)
OPTIONAL_TOKEN_ID = Param("token_id", "tokenId", ID, required=False)
BLOCK_NUMBER = _int("block_number", "blockNumber", minimum=0)
TRANSACTION_HASH = _str("transaction_hash", "transactionHash")
CONTRACT_ADDRESS = _str("contract_address", "contractAddress")
OPTIONAL_CONTRACT_ADDRESS = _str("contract_address", "contractAddress", required=False)
ACCOUNT_ADDRESS = _str("account_address", "accountAddress")
SIGNATURE = _str("signature", "signature", required=False)
TRANSACTION_TYPE = _str("transaction_type", "type", required=False)
PAGINATION = _pagination()
OPTIONAL_PAGINATION = _pagination(required=False)
BLOCK_RANGE = _block_range()


_CATALOG: List[Endpoint] = [
    # Tokens
    Endpoint("get_fungible_token", TOKENS,
             query_params=(TOKEN_ADDRESS,), model=TokenInfo),
    Endpoint("get_token_holders", TOKENS + "/{tokenAddress}/holders",
             path_params=(TOKEN_ADDRESS,),
             query_params=(_str("holder_address", "holderAddress", required=False),) + PAGINATION),
    Endpoint("get_token_burns", TOKENS + "/{tokenAddress}/burns",
             path_params=(TOKEN_ADDRESS,),
             query_params=PAGINATION + BLOCK_RANGE),
    Endpoint("get_token_transfers", TOKENS + "/{tokenAddress}/transfers",
             path_params=(TOKEN_ADDRESS,),
             query_params=PAGINATION + BLOCK_RANGE),

    # NFTs
    Endpoint("get_nft_item", NFTS,
             query_params=(NFT_ADDRESS, TOKEN_ID)),
    Endpoint("get_nft_info", NFTS + "/{tokenAddress}",
             path_params=(TOKEN_ADDRESS,)),
    Endpoint("get_nft_holders", NFTS + "/{tokenAddress}/holders",
             path_params=(TOKEN_ADDRESS,),
             query_params=PAGINATION + (OPTIONAL_TOKEN_ID,)),
    Endpoint("get_nft_transfers", NFTS + "/{tokenAddress}/transfers",
             path_params=(TOKEN_ADDRESS,),
             query_params=PAGINATION + (OPTIONAL_TOKEN_ID,) + BLOCK_RANGE),
    Endpoint("get_nft_inventories", NFTS + "/{tokenAddress}/inventories",
             path_params=(TOKEN_ADDRESS,),
             query_params=PAGINATION + (_str("keyword", "keyword", required=False),)),

    # Blocks
    Endpoint("get_latest_block", BLOCKS + "/latest"),
    Endpoint("get_latest_block_burns", BLOCKS + "/latest/burns",
             query_params=PAGINATION),
    Endpoint("get_latest_block_rewards", BLOCKS + "/latest/rewards",
             query_params=(BLOCK_NUMBER,)),
    Endpoint("get_block", BLOCKS,
             query_params=(BLOCK_NUMBER,)),
    Endpoint("get_blocks", BLOCKS,
             query_params=(BLOCK_NUMBER,) + BLOCK_RANGE + OPTIONAL_PAGINATION),
    Endpoint("get_block_burns", BLOCKS + "/{blockNumber}/burns",
             path_params=(BLOCK_NUMBER,)),
    Endpoint("get_block_rewards", BLOCKS + "/{blockNumber}/rewards",
             path_params=(BLOCK_NUMBER,)),
    Endpoint("get_internal_transactions_of_block", BLOCKS + "/{blockNumber}/internal-transactions",
             path_params=(BLOCK_NUMBER,),
             query_params=PAGINATION),
    Endpoint("get_transactions_of_block", BLOCKS + "/{blockNumber}/transactions",
             path_params=(BLOCK_NUMBER,),
             query_params=(TRANSACTION_TYPE,) + OPTIONAL_PAGINATION),
    Endpoint("get_blocks_by_timestamp", BLOCKS + "/timestamps/{timestamp}",
             path_params=(_int("timestamp", "timestamp", minimum=1),)),

    # Transactions
    Endpoint("get_transaction", TRANSACTIONS + "/{transactionHash}",
             path_params=(TRANSACTION_HASH,)),
    Endpoint("get_transaction_status", TRANSACTIONS + "/{transactionHash}/status",
             path_params=(TRANSACTION_HASH,)),
    Endpoint("get_transaction_receipt_status", TRANSACTION_RECEIPTS + "/status",
             query_params=(TRANSACTION_HASH,)),
    Endpoint("get_transaction_input_data", TRANSACTIONS + "/{transactionHash}/input-data",
             path_params=(TRANSACTION_HASH,)),
    Endpoint("get_transaction_event_logs", TRANSACTIONS + "/{transactionHash}/event-logs",
             path_params=(TRANSACTION_HASH,),
             query_params=PAGINATION + (SIGNATURE,)),
    Endpoint("get_transaction_internal_transactions", TRANSACTIONS + "/{transactionHash}/internal-transactions",
             path_params=(TRANSACTION_HASH,),
             query_params=PAGINATION),
    Endpoint("get_transaction_token_transfers", TRANSACTIONS + "/{transactionHash}/token-transfers",
             path_params=(TRANSACTION_HASH,),
             query_params=PAGINATION),
    Endpoint("get_transaction_nft_transfers", TRANSACTIONS + "/{transactionHash}/nft-transfers",
             path_params=(TRANSACTION_HASH,),
             query_params=PAGINATION),

    # Contracts
    Endpoint("get_contract_creation_code", CONTRACTS + "/creation-code",
             query_params=(CONTRACT_ADDRESS,)),
    Endpoint("get_contract_source_code", CONTRACTS + "/source-code",
             query_params=(CONTRACT_ADDRESS,)),
    Endpoint("get_contract_info", CONTRACTS + "/{contractAddress}",
             path_params=(CONTRACT_ADDRESS,)),
    Endpoint("get_contracts_info", CONTRACTS,
             query_params=(Param("contract_addresses", "contractAddresses", LIST),)),
    Endpoint("get_contract_abi", CONTRACTS + "/{contractAddress}/abi",
             path_params=(CONTRACT_ADDRESS,)),

    # Accounts
    Endpoint("get_account_info", ACCOUNTS + "/{accountAddress}",
             path_params=(ACCOUNT_ADDRESS,)),
    Endpoint("get_account_key_histories", ACCOUNTS + "/{accountAddress}/key-histories",
             path_params=(ACCOUNT_ADDRESS,),
             query_params=PAGINATION),
    Endpoint("get_account_token_balances", ACCOUNTS + "/{accountAddress}/token-balances",
             path_params=(ACCOUNT_ADDRESS,),
             query_params=PAGINATION),
    Endpoint("get_account_token_details", ACCOUNTS + "/{accountAddress}/token-details",
             path_params=(ACCOUNT_ADDRESS,),
             query_params=PAGINATION),
    Endpoint("get_account_kip17_nft_balances", ACCOUNTS + "/{accountAddress}/nft-balances/kip17",
             path_params=(ACCOUNT_ADDRESS,),
             query_params=PAGINATION),
    Endpoint("get_account_kip37_nft_balances", ACCOUNTS + "/{accountAddress}/nft-balances/kip37",
             path_params=(ACCOUNT_ADDRESS,),
             query_params=PAGINATION),
    Endpoint("get_account_nft_transfers", ACCOUNTS + "/{accountAddress}/nft-transfers",
             path_params=(ACCOUNT_ADDRESS,),
             query_params=PAGINATION + (OPTIONAL_CONTRACT_ADDRESS,) + BLOCK_RANGE),
    Endpoint("get_account_token_transfers", ACCOUNTS + "/{accountAddress}/token-transfers",
             path_params=(ACCOUNT_ADDRESS,),
             query_params=PAGINATION + (OPTIONAL_CONTRACT_ADDRESS,) + BLOCK_RANGE),
    Endpoint("get_account_event_logs", ACCOUNTS + "/{accountAddress}/event-logs",
             path_params=(ACCOUNT_ADDRESS,),
             query_params=PAGINATION + (SIGNATURE,) + BLOCK_RANGE),
    Endpoint("get_account_transactions", ACCOUNTS + "/{accountAddress}/transactions",
             path_params=(ACCOUNT_ADDRESS,),
             query_params=PAGINATION + BLOCK_RANGE + (
                 TRANSACTION_TYPE,
                 Param("directions", "directions", LIST, required=False),
             )),
    Endpoint("get_fee_paid_transactions", ACCOUNTS + "/{accountAddress}/fee-paid-transactions",
             path_params=(ACCOUNT_ADDRESS,),
             query_params=PAGINATION + BLOCK_RANGE + (TRANSACTION_TYPE,)),
]

ENDPOINTS: Dict[str, Endpoint] = {endpoint.name: endpoint for endpoint in _CATALOG}


def get_endpoint(name: str) -> Endpoint:
    """
    Looks up a catalog entry by operation name.

    :raises KeyError: If no endpoint has that name.
    """
    try:
        return ENDPOINTS[name]
    except KeyError:
        raise KeyError(f"Unknown endpoint: {name}") from None
