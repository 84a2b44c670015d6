"""dlt resources over paginated Kaiascan list endpoints."""

import logging
from typing import Any, Dict, List, Optional

import dlt

from ..core.endpoint import DEFAULT_PAGE_SIZE, EndpointSpec
from ..endpoints import accounts, nfts, tokens
from ..sdk import KaiascanSDK


class KaiascanSource:
    """Creating dlt resources for Kaiascan data.

    Example:
        source = KaiascanSource(KaiascanSDK(network="mainnet"))
        pipeline.run(source.token_transfers("0x..."), table_name="token_transfers")
    """

    def __init__(self, client: KaiascanSDK):
        self.client = client
        self.logger = logging.getLogger(self.__class__.__name__)

    def get_available_sources(self) -> List[str]:
        """Return list of available source names."""
        return [
            "account_transactions",
            "account_token_transfers",
            "token_transfers",
            "token_holders",
            "nft_transfers",
        ]

    def _resource(
        self,
        name: str,
        spec: EndpointSpec,
        params: Dict[str, Any],
        max_pages: Optional[int] = None,
    ):
        # Every page of one load uses the same config
        config = self.client.config
        params = {key: value for key, value in params.items() if value is not None}

        def _fetch():
            self.logger.info(f"Fetching {name} from {config.base_url} with {params}")
            for item in self.client.api.paginate(spec, params, max_pages=max_pages, config=config):
                if isinstance(item, dict):
                    item = {**item, "chain_id": config.chain_id}
                yield item

        return dlt.resource(_fetch, name=name, write_disposition="append")

    def account_transactions(
        self,
        account_address: str,
        size: int = DEFAULT_PAGE_SIZE,
        block_number_start: Optional[int] = None,
        block_number_end: Optional[int] = None,
        max_pages: Optional[int] = None,
    ):
        """Get all transactions of an account."""
        return self._resource(
            "account_transactions",
            accounts.GET_ACCOUNT_TRANSACTIONS,
            {
                "accountAddress": account_address,
                "size": size,
                "blockNumberStart": block_number_start,
                "blockNumberEnd": block_number_end,
            },
            max_pages,
        )

    def account_token_transfers(
        self,
        account_address: str,
        contract_address: Optional[str] = None,
        size: int = DEFAULT_PAGE_SIZE,
        max_pages: Optional[int] = None,
    ):
        """Get all token transfers of an account."""
        return self._resource(
            "account_token_transfers",
            accounts.GET_ACCOUNT_TOKEN_TRANSFERS,
            {
                "accountAddress": account_address,
                "contractAddress": contract_address,
                "size": size,
            },
            max_pages,
        )

    def token_transfers(
        self,
        token_address: str,
        size: int = DEFAULT_PAGE_SIZE,
        block_number_start: Optional[int] = None,
        block_number_end: Optional[int] = None,
        max_pages: Optional[int] = None,
    ):
        """Get all transfers of a fungible token."""
        return self._resource(
            "token_transfers",
            tokens.GET_TOKEN_TRANSFERS,
            {
                "tokenAddress": token_address,
                "size": size,
                "blockNumberStart": block_number_start,
                "blockNumberEnd": block_number_end,
            },
            max_pages,
        )

    def token_holders(
        self, token_address: str, size: int = DEFAULT_PAGE_SIZE, max_pages: Optional[int] = None
    ):
        return self._resource(
            "token_holders",
            tokens.GET_TOKEN_HOLDERS,
            {"tokenAddress": token_address, "size": size},
            max_pages,
        )

    def nft_transfers(
        self,
        nft_address: str,
        token_id: Optional[str] = None,
        size: int = DEFAULT_PAGE_SIZE,
        max_pages: Optional[int] = None,
    ):
        return self._resource(
            "nft_transfers",
            nfts.GET_NFT_TRANSFERS,
            {"nftAddress": nft_address, "tokenId": token_id, "size": size},
            max_pages,
        )
