"""Chain-wide endpoints."""

from typing import TypedDict

from ..core.endpoint import endpoint
from .common import API_PREFIX


class KaiaInfo(TypedDict, total=False):
    klayPrice: str
    kaiaPrice: str
    marketCap: str
    totalSupply: str
    circulatingSupply: str
    volume: str


GET_KAIA_INFO = endpoint("get_kaia_info", API_PREFIX + "kaia")
