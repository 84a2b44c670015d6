"""Endpoint catalog: one EndpointSpec per logical API operation."""

from typing import Dict

from ..core.endpoint import EndpointSpec
from . import accounts, blocks, contracts, general, nfts, tokens, transactions
from .common import JsonObject, PagedResult, Paging


def _collect() -> Dict[str, EndpointSpec]:
    catalog = {}
    for module in (general, accounts, tokens, nfts, blocks, transactions, contracts):
        for value in vars(module).values():
            if isinstance(value, EndpointSpec):
                catalog[value.name] = value
    return catalog


ENDPOINTS: Dict[str, EndpointSpec] = _collect()

__all__ = [
    "ENDPOINTS",
    "JsonObject",
    "PagedResult",
    "Paging",
    "accounts",
    "blocks",
    "contracts",
    "general",
    "nfts",
    "tokens",
    "transactions",
]
