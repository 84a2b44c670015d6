"""Block endpoints."""

from typing import List, TypedDict

from ..core.endpoint import endpoint, optional
from .common import API_PREFIX, BLOCK_NUMBER, BLOCK_RANGE

BLOCKS = API_PREFIX + "blocks"


class BlockInfo(TypedDict, total=False):
    number: int
    hash: str
    timestamp: int
    parentHash: str
    miner: str
    gasUsed: str
    gasLimit: str
    transactions: List[str]


class BlockBurns(TypedDict, total=False):
    accumulateBurntFees: str
    accumulateBurntKaia: str
    kip103Burnt: str
    kip160Burnt: str


class BlockRewards(TypedDict, total=False):
    minted: str
    totalFee: str
    burntFee: str
    distributions: List[dict]


GET_LATEST_BLOCK = endpoint("get_latest_block", BLOCKS + "/latest")

GET_BLOCK = endpoint("get_block", BLOCKS, BLOCK_NUMBER)

GET_BLOCKS = endpoint("get_blocks", BLOCKS, *BLOCK_RANGE, paginated=True)

GET_TRANSACTIONS_OF_BLOCK = endpoint(
    "get_transactions_of_block",
    BLOCKS + "/{blockNumber}/transactions",
    BLOCK_NUMBER,
    optional("type"),
    paginated=True,
)

GET_INTERNAL_TRANSACTIONS_OF_BLOCK = endpoint(
    "get_internal_transactions_of_block",
    BLOCKS + "/{blockNumber}/internal-transactions",
    BLOCK_NUMBER,
    paginated=True,
)

GET_BLOCK_BURNS = endpoint("get_block_burns", BLOCKS + "/{blockNumber}/burns", BLOCK_NUMBER)

GET_BLOCK_REWARDS = endpoint("get_block_rewards", BLOCKS + "/{blockNumber}/rewards", BLOCK_NUMBER)
