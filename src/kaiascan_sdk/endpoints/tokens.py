"""Fungible token endpoints."""

from typing import TypedDict

from ..core.endpoint import endpoint, required
from .common import API_PREFIX, BLOCK_RANGE

TOKENS = API_PREFIX + "tokens"


class TokenInfo(TypedDict, total=False):
    contractType: str
    name: str
    symbol: str
    icon: str
    decimal: int
    totalSupply: float
    totalTransfers: int
    officialSite: str
    burnAmount: float
    totalBurns: int


class TokenHolder(TypedDict, total=False):
    holderAddress: str
    amount: str
    percentage: str


class TokenBurn(TypedDict, total=False):
    transactionHash: str
    blockId: int
    datetime: str
    amount: str


GET_FUNGIBLE_TOKEN = endpoint("get_fungible_token", TOKENS, required("tokenAddress"))

GET_TOKEN_HOLDERS = endpoint(
    "get_token_holders", TOKENS + "/{tokenAddress}/holders", paginated=True
)

GET_TOKEN_TRANSFERS = endpoint(
    "get_token_transfers", TOKENS + "/{tokenAddress}/transfers", *BLOCK_RANGE, paginated=True
)

GET_TOKEN_BURNS = endpoint(
    "get_token_burns", TOKENS + "/{tokenAddress}/burns", paginated=True
)
