"""Account endpoints."""

from typing import Optional, TypedDict

from ..core.endpoint import endpoint, optional
from .common import API_PREFIX, BLOCK_RANGE

ACCOUNTS = API_PREFIX + "accounts/{accountAddress}"


class AccountInfo(TypedDict, total=False):
    address: str
    accountType: str
    balance: str
    totalTransactionCount: int
    txCount: int
    associatedKns: Optional[str]
    createdAt: str


class KeyHistory(TypedDict, total=False):
    transactionHash: str
    blockNumber: int
    keyType: str
    datetime: str


AccountTransaction = TypedDict(
    "AccountTransaction",
    {
        "transactionHash": str,
        "blockId": int,
        "datetime": str,
        "from": str,
        "to": str,
        "value": str,
        "txFee": str,
        "transactionType": str,
        "status": str,
        "methodId": str,
    },
    total=False,
)

TokenTransfer = TypedDict(
    "TokenTransfer",
    {
        "contract": dict,
        "transactionHash": str,
        "blockId": int,
        "datetime": str,
        "from": str,
        "to": str,
        "amount": str,
        "transferType": str,
    },
    total=False,
)


class TokenDetail(TypedDict, total=False):
    contract: dict
    balance: str
    updatedAt: str


class NftBalance(TypedDict, total=False):
    contract: dict
    tokenId: str
    tokenCount: str
    tokenUri: str
    updatedAt: str


GET_ACCOUNT = endpoint("get_account", ACCOUNTS)

GET_ACCOUNT_KEY_HISTORIES = endpoint(
    "get_account_key_histories", ACCOUNTS + "/key-histories", paginated=True
)

GET_ACCOUNT_TRANSACTIONS = endpoint(
    "get_account_transactions",
    ACCOUNTS + "/transactions",
    optional("type"),
    optional("directions"),
    *BLOCK_RANGE,
    paginated=True,
)

GET_ACCOUNT_INTERNAL_TRANSACTIONS = endpoint(
    "get_account_internal_transactions",
    ACCOUNTS + "/internal-transactions",
    *BLOCK_RANGE,
    paginated=True,
)

GET_ACCOUNT_TOKEN_TRANSFERS = endpoint(
    "get_account_token_transfers",
    ACCOUNTS + "/token-transfers",
    optional("contractAddress"),
    *BLOCK_RANGE,
    paginated=True,
)

GET_ACCOUNT_NFT_TRANSFERS = endpoint(
    "get_account_nft_transfers",
    ACCOUNTS + "/nft-transfers",
    optional("contractAddress"),
    *BLOCK_RANGE,
    paginated=True,
)

GET_ACCOUNT_TOKEN_DETAILS = endpoint(
    "get_account_token_details",
    ACCOUNTS + "/token-details",
    optional("contractAddress"),
    paginated=True,
)

GET_ACCOUNT_NFT_BALANCES = endpoint(
    "get_account_nft_balances",
    ACCOUNTS + "/nft-balances",
    optional("contractAddress"),
    paginated=True,
)

GET_ACCOUNT_TOKEN_APPROVES = endpoint(
    "get_account_token_approves",
    ACCOUNTS + "/token-approves",
    optional("spenderAddress"),
    paginated=True,
)

GET_ACCOUNT_NFT_APPROVES = endpoint(
    "get_account_nft_approves",
    ACCOUNTS + "/nft-approves",
    optional("spenderAddress"),
    paginated=True,
)

GET_ACCOUNT_EVENT_LOGS = endpoint(
    "get_account_event_logs",
    ACCOUNTS + "/event-logs",
    optional("signature"),
    *BLOCK_RANGE,
    paginated=True,
)
