"""Kaiascan SDK facade: one method per API operation."""

import logging
from typing import Any, Iterator, List, Mapping, Optional, Sequence, Union

from .config.settings import APISettings, ClientConfig, NetworkLike
from .core.base import ApiClient
from .core.endpoint import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, EndpointSpec
from .core.exceptions import ConfigurationError, ValidationError
from .core.transport import RequestsTransport, Transport
from .endpoints import ENDPOINTS, accounts, blocks, contracts, general, nfts, tokens, transactions
from .endpoints.common import JsonObject, PagedResult


def _check_address_list(field: str, addresses: Any) -> List[str]:
    if isinstance(addresses, str) or not isinstance(addresses, (list, tuple)):
        raise ValidationError(field, addresses, "must be a list of addresses")
    if not addresses:
        raise ValidationError(field, addresses, "must contain at least one address")
    for address in addresses:
        if not isinstance(address, str) or not address.strip():
            raise ValidationError(field, addresses, f"contains an empty or non-string address {address!r}")
    return list(addresses)


def _check_directions(directions: Optional[Sequence[str]]) -> Optional[List[str]]:
    if directions is None:
        return None
    directions = [directions] if isinstance(directions, str) else list(directions)
    if not all(isinstance(d, str) and d.strip() for d in directions):
        raise ValidationError("directions", directions, "must be a list of non-empty strings")
    return directions


class KaiascanSDK:
    """Client for the Kaiascan explorer API.

    Each instance owns one immutable ``ClientConfig``. Setters swap in a new
    config; calls already in flight keep the snapshot they started with.

    Example:
        sdk = KaiascanSDK(network="testnet", api_key="...")
        token = sdk.get_fungible_token("0x...")
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        network: Optional[NetworkLike] = None,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
        transport: Optional[Transport] = None,
    ):
        """
        Initializes the SDK.

        Args:
            config: A complete config. Cannot be combined with the other
                config arguments.
            network: Network preset: a ``Network``, "mainnet", "testnet",
                a chain id, or True for testnet. Defaults to KAIASCAN_NETWORK.
            api_key: Bearer token. Defaults to KAIASCAN_API_KEY.
            base_url: Overrides the network's base URL.
            headers: Replaces the default header set.
            transport: Custom transport, e.g. a stub in tests.
        """
        api_settings = None
        if config is None or transport is None:
            api_settings = APISettings()

        if config is None:
            config = ClientConfig.for_network(
                network if network is not None else api_settings.network,
                api_key=api_key or api_settings.api_key,
                base_url=base_url,
                headers=headers,
            )
        elif any(arg is not None for arg in (network, api_key, base_url, headers)):
            raise ConfigurationError(
                "Pass either 'config' or network/api_key/base_url/headers, not both"
            )

        if transport is None:
            transport = RequestsTransport(
                timeout=api_settings.timeout, calls_per_second=api_settings.rate_limit
            )

        self._client = ApiClient(config, transport)
        self.logger = logging.getLogger(self.__class__.__name__)

    # Configuration

    @property
    def api(self) -> ApiClient:
        return self._client

    @property
    def config(self) -> ClientConfig:
        return self._client.config

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def chain_id(self) -> str:
        return self.config.chain_id

    def set_base_url(self, base_url: str) -> None:
        self._client.config = self.config.with_base_url(base_url)

    def set_headers(self, headers: Mapping[str, str]) -> None:
        self._client.config = self.config.with_headers(headers)

    def set_header(self, key: str, value: str) -> None:
        """Add or replace one header, keeping the rest."""
        self._client.config = self.config.with_header(key, value)

    def set_network(self, network: NetworkLike) -> None:
        config = self.config.with_network(network)
        self._client.config = config
        self.logger.info(f"Switched to {config.network.value} ({config.base_url})")

    def set_config(
        self,
        config: Optional[ClientConfig] = None,
        *,
        base_url: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        """Replace the config, or update base URL and headers in one step."""
        if config is None:
            config = self.config
            if base_url:
                config = config.with_base_url(base_url)
            if headers is not None:
                config = config.with_headers(headers)
        self._client.config = config

    def _invoke(self, spec: EndpointSpec, **params: Any) -> Any:
        return self._client.invoke(spec, params)

    def paginate(
        self,
        operation: Union[str, EndpointSpec],
        *,
        max_pages: Optional[int] = None,
        **params: Any,
    ) -> Iterator[JsonObject]:
        """Iterate over every item of a paginated operation.

        Args:
            operation: Operation name (e.g. "get_token_holders") or its spec.
            max_pages: Stop after this many pages.
            **params: Path and query params using API names, e.g.
                ``tokenAddress="0x..."``.
        """
        if isinstance(operation, str):
            if operation not in ENDPOINTS:
                raise ValueError(f"Unknown operation '{operation}'")
            operation = ENDPOINTS[operation]
        return self._client.paginate(operation, params, max_pages=max_pages)

    # General

    def get_kaia_info(self) -> general.KaiaInfo:
        """Get KAIA price, supply and market data."""
        return self._invoke(general.GET_KAIA_INFO)

    # Accounts

    def get_account(self, account_address: str) -> accounts.AccountInfo:
        return self._invoke(accounts.GET_ACCOUNT, accountAddress=account_address)

    def get_account_key_histories(
        self, account_address: str, page: int = DEFAULT_PAGE, size: int = DEFAULT_PAGE_SIZE
    ) -> PagedResult:
        return self._invoke(
            accounts.GET_ACCOUNT_KEY_HISTORIES,
            accountAddress=account_address,
            page=page,
            size=size,
        )

    def get_account_transactions(
        self,
        account_address: str,
        page: int = DEFAULT_PAGE,
        size: int = DEFAULT_PAGE_SIZE,
        type: Optional[str] = None,
        directions: Optional[Sequence[str]] = None,
        block_number_start: Optional[int] = None,
        block_number_end: Optional[int] = None,
    ) -> PagedResult:
        """
        Get transactions sent or received by an account.

        Args:
            account_address: The account address.
            page: Page number, starting at 1.
            size: Page size, 1 to 2000.
            type: Transaction type filter.
            directions: Direction filters, e.g. ["in", "out"]; sent comma-joined.
            block_number_start: First block of the range.
            block_number_end: Last block of the range.
        """
        return self._invoke(
            accounts.GET_ACCOUNT_TRANSACTIONS,
            accountAddress=account_address,
            page=page,
            size=size,
            type=type,
            directions=_check_directions(directions),
            blockNumberStart=block_number_start,
            blockNumberEnd=block_number_end,
        )

    def get_account_internal_transactions(
        self,
        account_address: str,
        page: int = DEFAULT_PAGE,
        size: int = DEFAULT_PAGE_SIZE,
        block_number_start: Optional[int] = None,
        block_number_end: Optional[int] = None,
    ) -> PagedResult:
        return self._invoke(
            accounts.GET_ACCOUNT_INTERNAL_TRANSACTIONS,
            accountAddress=account_address,
            page=page,
            size=size,
            blockNumberStart=block_number_start,
            blockNumberEnd=block_number_end,
        )

    def get_account_token_transfers(
        self,
        account_address: str,
        page: int = DEFAULT_PAGE,
        size: int = DEFAULT_PAGE_SIZE,
        contract_address: Optional[str] = None,
        block_number_start: Optional[int] = None,
        block_number_end: Optional[int] = None,
    ) -> PagedResult:
        """Get fungible token transfers of an account, optionally for one token."""
        return self._invoke(
            accounts.GET_ACCOUNT_TOKEN_TRANSFERS,
            accountAddress=account_address,
            page=page,
            size=size,
            contractAddress=contract_address,
            blockNumberStart=block_number_start,
            blockNumberEnd=block_number_end,
        )

    def get_account_nft_transfers(
        self,
        account_address: str,
        page: int = DEFAULT_PAGE,
        size: int = DEFAULT_PAGE_SIZE,
        contract_address: Optional[str] = None,
        block_number_start: Optional[int] = None,
        block_number_end: Optional[int] = None,
    ) -> PagedResult:
        return self._invoke(
            accounts.GET_ACCOUNT_NFT_TRANSFERS,
            accountAddress=account_address,
            page=page,
            size=size,
            contractAddress=contract_address,
            blockNumberStart=block_number_start,
            blockNumberEnd=block_number_end,
        )

    def get_account_token_details(
        self,
        account_address: str,
        page: int = DEFAULT_PAGE,
        size: int = DEFAULT_PAGE_SIZE,
        contract_address: Optional[str] = None,
    ) -> PagedResult:
        """Get the fungible token balances held by an account."""
        return self._invoke(
            accounts.GET_ACCOUNT_TOKEN_DETAILS,
            accountAddress=account_address,
            page=page,
            size=size,
            contractAddress=contract_address,
        )

    def get_account_nft_balances(
        self,
        account_address: str,
        page: int = DEFAULT_PAGE,
        size: int = DEFAULT_PAGE_SIZE,
        contract_address: Optional[str] = None,
    ) -> PagedResult:
        return self._invoke(
            accounts.GET_ACCOUNT_NFT_BALANCES,
            accountAddress=account_address,
            page=page,
            size=size,
            contractAddress=contract_address,
        )

    def get_account_token_approves(
        self,
        account_address: str,
        page: int = DEFAULT_PAGE,
        size: int = DEFAULT_PAGE_SIZE,
        spender_address: Optional[str] = None,
    ) -> PagedResult:
        return self._invoke(
            accounts.GET_ACCOUNT_TOKEN_APPROVES,
            accountAddress=account_address,
            page=page,
            size=size,
            spenderAddress=spender_address,
        )

    def get_account_nft_approves(
        self,
        account_address: str,
        page: int = DEFAULT_PAGE,
        size: int = DEFAULT_PAGE_SIZE,
        spender_address: Optional[str] = None,
    ) -> PagedResult:
        return self._invoke(
            accounts.GET_ACCOUNT_NFT_APPROVES,
            accountAddress=account_address,
            page=page,
            size=size,
            spenderAddress=spender_address,
        )

    def get_account_event_logs(
        self,
        account_address: str,
        page: int = DEFAULT_PAGE,
        size: int = DEFAULT_PAGE_SIZE,
        signature: Optional[str] = None,
        block_number_start: Optional[int] = None,
        block_number_end: Optional[int] = None,
    ) -> PagedResult:
        """Get event logs emitted by a contract account, optionally by event signature."""
        return self._invoke(
            accounts.GET_ACCOUNT_EVENT_LOGS,
            accountAddress=account_address,
            page=page,
            size=size,
            signature=signature,
            blockNumberStart=block_number_start,
            blockNumberEnd=block_number_end,
        )

    # Tokens

    def get_fungible_token(self, token_address: str) -> tokens.TokenInfo:
        """Get metadata and supply figures of a fungible token."""
        return self._invoke(tokens.GET_FUNGIBLE_TOKEN, tokenAddress=token_address)

    def get_token_holders(
        self, token_address: str, page: int = DEFAULT_PAGE, size: int = DEFAULT_PAGE_SIZE
    ) -> PagedResult:
        return self._invoke(
            tokens.GET_TOKEN_HOLDERS, tokenAddress=token_address, page=page, size=size
        )

    def get_token_transfers(
        self,
        token_address: str,
        page: int = DEFAULT_PAGE,
        size: int = DEFAULT_PAGE_SIZE,
        block_number_start: Optional[int] = None,
        block_number_end: Optional[int] = None,
    ) -> PagedResult:
        return self._invoke(
            tokens.GET_TOKEN_TRANSFERS,
            tokenAddress=token_address,
            page=page,
            size=size,
            blockNumberStart=block_number_start,
            blockNumberEnd=block_number_end,
        )

    def get_token_burns(
        self, token_address: str, page: int = DEFAULT_PAGE, size: int = DEFAULT_PAGE_SIZE
    ) -> PagedResult:
        return self._invoke(
            tokens.GET_TOKEN_BURNS, tokenAddress=token_address, page=page, size=size
        )

    # NFTs

    def get_nft(self, nft_address: str) -> nfts.NFTInfo:
        return self._invoke(nfts.GET_NFT, nftAddress=nft_address)

    def get_nft_item(self, nft_address: str, token_id: Union[str, int]) -> nfts.NFTItem:
        """Get a single NFT, including its free-form metadata."""
        return self._invoke(nfts.GET_NFT_ITEM, nftAddress=nft_address, tokenId=token_id)

    def get_nft_inventories(
        self,
        nft_address: str,
        page: int = DEFAULT_PAGE,
        size: int = DEFAULT_PAGE_SIZE,
        keyword: Optional[str] = None,
    ) -> PagedResult:
        return self._invoke(
            nfts.GET_NFT_INVENTORIES,
            nftAddress=nft_address,
            page=page,
            size=size,
            keyword=keyword,
        )

    def get_nft_transfers(
        self,
        nft_address: str,
        page: int = DEFAULT_PAGE,
        size: int = DEFAULT_PAGE_SIZE,
        token_id: Optional[Union[str, int]] = None,
        block_number_start: Optional[int] = None,
        block_number_end: Optional[int] = None,
    ) -> PagedResult:
        return self._invoke(
            nfts.GET_NFT_TRANSFERS,
            nftAddress=nft_address,
            page=page,
            size=size,
            tokenId=token_id,
            blockNumberStart=block_number_start,
            blockNumberEnd=block_number_end,
        )

    def get_nft_holders(
        self,
        nft_address: str,
        page: int = DEFAULT_PAGE,
        size: int = DEFAULT_PAGE_SIZE,
        holder_address: Optional[str] = None,
        token_id: Optional[Union[str, int]] = None,
    ) -> PagedResult:
        return self._invoke(
            nfts.GET_NFT_HOLDERS,
            nftAddress=nft_address,
            page=page,
            size=size,
            holderAddress=holder_address,
            tokenId=token_id,
        )

    # Blocks

    def get_latest_block(self) -> blocks.BlockInfo:
        return self._invoke(blocks.GET_LATEST_BLOCK)

    def get_block(self, block_number: int) -> blocks.BlockInfo:
        return self._invoke(blocks.GET_BLOCK, blockNumber=block_number)

    def get_blocks(
        self,
        page: int = DEFAULT_PAGE,
        size: int = DEFAULT_PAGE_SIZE,
        block_number_start: Optional[int] = None,
        block_number_end: Optional[int] = None,
    ) -> PagedResult:
        return self._invoke(
            blocks.GET_BLOCKS,
            page=page,
            size=size,
            blockNumberStart=block_number_start,
            blockNumberEnd=block_number_end,
        )

    def get_transactions_of_block(
        self,
        block_number: int,
        page: int = DEFAULT_PAGE,
        size: int = DEFAULT_PAGE_SIZE,
        type: Optional[str] = None,
    ) -> PagedResult:
        return self._invoke(
            blocks.GET_TRANSACTIONS_OF_BLOCK,
            blockNumber=block_number,
            page=page,
            size=size,
            type=type,
        )

    def get_internal_transactions_of_block(
        self, block_number: int, page: int = DEFAULT_PAGE, size: int = DEFAULT_PAGE_SIZE
    ) -> PagedResult:
        return self._invoke(
            blocks.GET_INTERNAL_TRANSACTIONS_OF_BLOCK,
            blockNumber=block_number,
            page=page,
            size=size,
        )

    def get_block_burns(self, block_number: int) -> blocks.BlockBurns:
        return self._invoke(blocks.GET_BLOCK_BURNS, blockNumber=block_number)

    def get_block_rewards(self, block_number: int) -> blocks.BlockRewards:
        return self._invoke(blocks.GET_BLOCK_REWARDS, blockNumber=block_number)

    # Transactions

    def get_transaction(self, transaction_hash: str) -> transactions.TransactionInfo:
        return self._invoke(transactions.GET_TRANSACTION, transactionHash=transaction_hash)

    def get_transaction_receipt_status(self, transaction_hash: str) -> transactions.ReceiptStatus:
        return self._invoke(
            transactions.GET_TRANSACTION_RECEIPT_STATUS, transactionHash=transaction_hash
        )

    def get_transaction_token_transfers(
        self, transaction_hash: str, page: int = DEFAULT_PAGE, size: int = DEFAULT_PAGE_SIZE
    ) -> PagedResult:
        return self._invoke(
            transactions.GET_TRANSACTION_TOKEN_TRANSFERS,
            transactionHash=transaction_hash,
            page=page,
            size=size,
        )

    def get_transaction_nft_transfers(
        self, transaction_hash: str, page: int = DEFAULT_PAGE, size: int = DEFAULT_PAGE_SIZE
    ) -> PagedResult:
        return self._invoke(
            transactions.GET_TRANSACTION_NFT_TRANSFERS,
            transactionHash=transaction_hash,
            page=page,
            size=size,
        )

    def get_transaction_internal_transactions(
        self, transaction_hash: str, page: int = DEFAULT_PAGE, size: int = DEFAULT_PAGE_SIZE
    ) -> PagedResult:
        return self._invoke(
            transactions.GET_TRANSACTION_INTERNAL_TRANSACTIONS,
            transactionHash=transaction_hash,
            page=page,
            size=size,
        )

    def get_transaction_event_logs(
        self,
        transaction_hash: str,
        page: int = DEFAULT_PAGE,
        size: int = DEFAULT_PAGE_SIZE,
        signature: Optional[str] = None,
    ) -> PagedResult:
        return self._invoke(
            transactions.GET_TRANSACTION_EVENT_LOGS,
            transactionHash=transaction_hash,
            page=page,
            size=size,
            signature=signature,
        )

    # Contracts

    def get_contract_source_code(self, contract_address: str) -> contracts.ContractSourceCode:
        return self._invoke(contracts.GET_CONTRACT_SOURCE_CODE, contractAddress=contract_address)

    def get_contract_creation_code(self, contract_address: str) -> str:
        return self._invoke(
            contracts.GET_CONTRACT_CREATION_CODE, contractAddress=contract_address
        )

    def get_contracts_creation_info(
        self, contract_addresses: Sequence[str]
    ) -> contracts.ContractCreationInfos:
        """
        Get creation transactions for one or more contracts.

        Raises:
            ValidationError: If ``contract_addresses`` is not a non-empty list
                of addresses.
        """
        addresses = _check_address_list("contractAddresses", contract_addresses)
        return self._invoke(contracts.GET_CONTRACTS_CREATION_INFO, contractAddresses=addresses)
