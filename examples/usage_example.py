#!/usr/bin/env python3
"""
Example usage of kaiascan_sdk: direct calls and a dlt load into DuckDB.
"""

import logging

import dlt

from kaiascan_sdk import APIError, KaiascanSDK, KaiascanSource, TransportError
from kaiascan_sdk.utils import setup_logging

logger = logging.getLogger(__name__)

USDT = "0xd077a400968890eacc75cdc901f0356c943e4fdb"


def show_token(sdk: KaiascanSDK, token_address: str):
    """Print basic token info, branching on the error kind."""
    try:
        token = sdk.get_fungible_token(token_address)
    except APIError as e:
        logger.error(f"Kaiascan rejected {token_address}: [{e.code}] {e.msg}")
        return
    except TransportError as e:
        logger.error(f"Request failed with status {e.status_code}: {e}")
        return

    logger.info(f"{token.get('name')} ({token.get('symbol')}), decimals {token.get('decimal')}")


def load_token_holders(sdk: KaiascanSDK, token_address: str, max_pages: int = 5):
    """Load token holders into a local DuckDB database."""
    source = KaiascanSource(sdk)
    pipeline = dlt.pipeline(
        pipeline_name="kaiascan",
        destination="duckdb",
        dataset_name="kaiascan_raw",
    )
    load_info = pipeline.run(
        source.token_holders(token_address, size=100, max_pages=max_pages),
        table_name="token_holders",
    )
    logger.info(load_info)


if __name__ == "__main__":
    setup_logging()

    sdk = KaiascanSDK(network="mainnet")
    latest = sdk.get_latest_block()
    logger.info(f"Latest block: {latest}")

    show_token(sdk, USDT)
    load_token_holders(sdk, USDT)
