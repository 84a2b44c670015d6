"""Shapes and parameters shared by several endpoint groups."""

from typing import Any, Dict, List, TypedDict

from ..core.endpoint import is_non_negative_int, optional, required

API_PREFIX = "api/v1/"

BLOCK_NUMBER_REASON = "must be a non-negative integer"

BLOCK_NUMBER_START = optional(
    "blockNumberStart", validate=is_non_negative_int, reason=BLOCK_NUMBER_REASON
)
BLOCK_NUMBER_END = optional(
    "blockNumberEnd", validate=is_non_negative_int, reason=BLOCK_NUMBER_REASON
)
BLOCK_RANGE = (BLOCK_NUMBER_START, BLOCK_NUMBER_END)

# Used both as the {blockNumber} path segment and as a query param
BLOCK_NUMBER = required("blockNumber", validate=is_non_negative_int, reason=BLOCK_NUMBER_REASON)

# Free-form JSON object, used where the server defines no fixed schema
JsonObject = Dict[str, Any]


class Paging(TypedDict, total=False):
    totalCount: int
    currentPage: int
    last: bool
    totalPage: int


class PagedResult(TypedDict, total=False):
    results: List[JsonObject]
    paging: Paging
    property: JsonObject
