"""Contract endpoints."""

from typing import List, TypedDict

from ..core.endpoint import endpoint, required
from .common import API_PREFIX

CONTRACTS = API_PREFIX + "contracts"


class ContractSourceCode(TypedDict, total=False):
    contractAddress: str
    contractName: str
    compilerVersion: str
    optimizationFlag: str
    sourceCode: str
    abi: str


class ContractCreationInfo(TypedDict, total=False):
    contractAddress: str
    contractCreator: str
    transactionHash: str
    blockNumber: int


GET_CONTRACT_SOURCE_CODE = endpoint(
    "get_contract_source_code", CONTRACTS + "/source-code", required("contractAddress")
)

GET_CONTRACT_CREATION_CODE = endpoint(
    "get_contract_creation_code", CONTRACTS + "/creation-code", required("contractAddress")
)

GET_CONTRACTS_CREATION_INFO = endpoint(
    "get_contracts_creation_info",
    CONTRACTS + "/creation-transactions",
    required("contractAddresses"),
)

ContractCreationInfos = List[ContractCreationInfo]
