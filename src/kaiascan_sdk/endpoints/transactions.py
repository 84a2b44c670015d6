"""Transaction endpoints."""

from typing import TypedDict

from ..core.endpoint import endpoint, optional, required
from .common import API_PREFIX

TRANSACTIONS = API_PREFIX + "transactions/{transactionHash}"

TransactionInfo = TypedDict(
    "TransactionInfo",
    {
        "hash": str,
        "blockNumber": int,
        "from": str,
        "to": str,
        "value": str,
        "gasPrice": str,
        "status": bool,
        "input": str,
    },
    total=False,
)


class ReceiptStatus(TypedDict, total=False):
    status: str
    failReason: str


GET_TRANSACTION = endpoint("get_transaction", TRANSACTIONS)

GET_TRANSACTION_RECEIPT_STATUS = endpoint(
    "get_transaction_receipt_status",
    API_PREFIX + "transaction-receipts/status",
    required("transactionHash"),
)

GET_TRANSACTION_TOKEN_TRANSFERS = endpoint(
    "get_transaction_token_transfers", TRANSACTIONS + "/token-transfers", paginated=True
)

GET_TRANSACTION_NFT_TRANSFERS = endpoint(
    "get_transaction_nft_transfers", TRANSACTIONS + "/nft-transfers", paginated=True
)

GET_TRANSACTION_INTERNAL_TRANSACTIONS = endpoint(
    "get_transaction_internal_transactions",
    TRANSACTIONS + "/internal-transactions",
    paginated=True,
)

GET_TRANSACTION_EVENT_LOGS = endpoint(
    "get_transaction_event_logs",
    TRANSACTIONS + "/event-logs",
    optional("signature"),
    paginated=True,
)
