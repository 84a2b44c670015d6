"""NFT endpoints."""

from typing import TypedDict

from ..core.endpoint import endpoint, optional, required
from .common import API_PREFIX, BLOCK_RANGE, JsonObject

NFTS = API_PREFIX + "nfts"


class NFTInfo(TypedDict, total=False):
    contractType: str
    name: str
    symbol: str
    icon: str
    totalSupply: str
    totalTransfers: int
    officialSite: str


class NFTItem(TypedDict, total=False):
    tokenId: str
    owner: str
    contractAddress: str
    tokenUri: str
    # Metadata is whatever the token URI served; no fixed schema
    metadata: JsonObject


class NFTHolder(TypedDict, total=False):
    holderAddress: str
    tokenId: str
    tokenCount: str


GET_NFT = endpoint("get_nft", NFTS + "/{nftAddress}")

GET_NFT_ITEM = endpoint("get_nft_item", NFTS, required("nftAddress"), required("tokenId"))

GET_NFT_INVENTORIES = endpoint(
    "get_nft_inventories", NFTS + "/{nftAddress}/inventories", optional("keyword"), paginated=True
)

GET_NFT_TRANSFERS = endpoint(
    "get_nft_transfers",
    NFTS + "/{nftAddress}/transfers",
    optional("tokenId"),
    *BLOCK_RANGE,
    paginated=True,
)

GET_NFT_HOLDERS = endpoint(
    "get_nft_holders",
    NFTS + "/{nftAddress}/holders",
    optional("holderAddress"),
    optional("tokenId"),
    paginated=True,
)
