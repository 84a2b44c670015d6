import threading

import pytest

from kaiascan_sdk import (
    APIError,
    ClientConfig,
    ConfigurationError,
    KaiascanSDK,
    TransportError,
    ValidationError,
)
from kaiascan_sdk.endpoints import ENDPOINTS

from conftest import MAINNET_URL, TESTNET_URL, StubTransport, envelope, page

PAGINATED = sorted(name for name, spec in ENDPOINTS.items() if spec.paginated)


def _path_args(name):
    return [1 if param == "blockNumber" else "0xabc" for param in ENDPOINTS[name].path_params]


def test_every_endpoint_has_a_facade_method():
    for name in ENDPOINTS:
        assert callable(getattr(KaiascanSDK, name)), name


def test_get_fungible_token(sdk, transport):
    token = {
        "contractType": "ERC20",
        "name": "Mock Token",
        "symbol": "MTK",
        "decimal": 18,
        "totalSupply": 1000000,
    }
    transport.reply(200, envelope(token))

    assert sdk.get_fungible_token("0xABC") == token
    assert transport.urls == [f"{MAINNET_URL}api/v1/tokens?tokenAddress=0xABC"]


def test_get_transaction_http_404(sdk, transport):
    transport.reply(404, b"<html>not json</html>")

    with pytest.raises(TransportError) as exc_info:
        sdk.get_transaction("0xHash")

    assert exc_info.value.status_code == 404
    assert transport.urls == [f"{MAINNET_URL}api/v1/transactions/0xHash"]


@pytest.mark.parametrize(
    "method, args",
    [
        ("get_latest_block", ()),
        ("get_block", (100,)),
        ("get_nft_item", ("0xnft", "1")),
        ("get_account", ("0xabc",)),
        ("get_contract_source_code", ("0xabc",)),
    ],
)
def test_application_error_is_api_error(sdk, transport, method, args):
    transport.reply(200, envelope(None, code=4001, msg="not found"))

    with pytest.raises(APIError) as exc_info:
        getattr(sdk, method)(*args)

    assert exc_info.value.code == 4001
    assert exc_info.value.msg == "not found"


def test_account_transactions_query(sdk, transport):
    sdk.get_account_transactions("0xabc", page=2, size=50, directions=["in", "out"])

    url = transport.urls[0]
    assert url.startswith(f"{MAINNET_URL}api/v1/accounts/0xabc/transactions?")
    assert "page=2&size=50&directions=in,out" in url
    assert "type=" not in url


@pytest.mark.parametrize("name", PAGINATED)
@pytest.mark.parametrize("bad", [{"page": 0}, {"size": 0}, {"size": 2001}])
def test_pagination_is_validated_before_sending(sdk, transport, name, bad):
    with pytest.raises(ValidationError):
        getattr(sdk, name)(*_path_args(name), **bad)
    assert transport.calls == []


def test_identical_calls_give_equal_results(sdk, transport):
    transport.reply(200, envelope({"number": 7, "transactions": ["0x1", "0x2"]}))

    first = sdk.get_block(7)
    second = sdk.get_block(7)

    assert first == second
    assert transport.urls[0] == transport.urls[1]


def test_block_number_path_is_validated(sdk, transport):
    with pytest.raises(ValidationError):
        sdk.get_block_rewards(-1)
    assert transport.calls == []


def test_get_block_rewards(sdk, transport):
    sdk.get_block_rewards(12345)
    assert transport.urls == [f"{MAINNET_URL}api/v1/blocks/12345/rewards"]


def test_contracts_creation_info_joins_addresses(sdk, transport):
    sdk.get_contracts_creation_info(["0xa", "0xb"])
    assert transport.urls == [
        f"{MAINNET_URL}api/v1/contracts/creation-transactions?contractAddresses=0xa,0xb"
    ]


@pytest.mark.parametrize("addresses", [[], "0xa", ["0xa", ""], None])
def test_contracts_creation_info_requires_addresses(sdk, transport, addresses):
    with pytest.raises(ValidationError) as exc_info:
        sdk.get_contracts_creation_info(addresses)
    assert exc_info.value.field == "contractAddresses"
    assert transport.calls == []


def test_required_argument_is_validated(sdk, transport):
    with pytest.raises(ValidationError):
        sdk.get_fungible_token("")
    assert transport.calls == []


def test_default_headers(sdk, transport):
    sdk.get_latest_block()
    assert transport.calls[0][1] == {"Content-Type": "application/json"}


def test_api_key_adds_bearer_token(transport):
    sdk = KaiascanSDK(api_key="secret", transport=transport)
    sdk.get_latest_block()
    assert transport.calls[0][1]["Authorization"] == "Bearer secret"


def test_api_key_from_environment(monkeypatch, transport):
    monkeypatch.setenv("KAIASCAN_API_KEY", "from-env")
    monkeypatch.setenv("KAIASCAN_NETWORK", "testnet")

    sdk = KaiascanSDK(transport=transport)
    sdk.get_latest_block()

    url, headers = transport.calls[0]
    assert url.startswith(TESTNET_URL)
    assert headers["Authorization"] == "Bearer from-env"


def test_config_and_overrides_are_exclusive(transport):
    with pytest.raises(ConfigurationError):
        KaiascanSDK(ClientConfig.for_network("mainnet"), network="testnet", transport=transport)


def test_testnet_flag(transport):
    sdk = KaiascanSDK(network=True, transport=transport)
    assert sdk.base_url == TESTNET_URL
    assert sdk.chain_id == "1001"


def test_setters_replace_config(sdk, transport):
    original = sdk.config

    sdk.set_base_url("http://localhost:9000")
    sdk.set_headers({"X-Trace": "1"})
    sdk.get_latest_block()

    url, headers = transport.calls[0]
    assert url == "http://localhost:9000/api/v1/blocks/latest"
    assert headers == {"X-Trace": "1", "Content-Type": "application/json"}
    assert original.base_url == MAINNET_URL


def test_set_config(sdk, transport):
    sdk.set_config(base_url="http://proxy/", headers={"X-A": "b"})
    assert sdk.base_url == "http://proxy/"
    assert sdk.config.headers["X-A"] == "b"

    sdk.set_config(ClientConfig.for_network("testnet"))
    assert sdk.base_url == TESTNET_URL


def test_network_switch_affects_next_call_only(sdk, transport):
    sdk.get_latest_block()
    sdk.set_network("testnet")
    sdk.get_latest_block()

    assert transport.urls == [
        f"{MAINNET_URL}api/v1/blocks/latest",
        f"{TESTNET_URL}api/v1/blocks/latest",
    ]
    assert sdk.chain_id == "1001"


class BlockingTransport(StubTransport):
    """Blocks the first request until released."""

    def __init__(self):
        super().__init__()
        self.entered = threading.Event()
        self.release = threading.Event()

    def send(self, url, headers):
        response = super().send(url, headers)
        if len(self.calls) == 1:
            self.entered.set()
            assert self.release.wait(timeout=5)
        return response


def test_in_flight_call_keeps_its_config_snapshot():
    transport = BlockingTransport()
    transport.enqueue(200, envelope(page([{"i": 1}], 1, 2)))
    transport.enqueue(200, envelope(page([{"i": 2}], 2, 2)))
    sdk = KaiascanSDK(network="mainnet", api_key="main-key", transport=transport)

    result = {}

    def run():
        result["items"] = list(sdk.paginate("get_token_holders", tokenAddress="0xabc", size=1))

    worker = threading.Thread(target=run)
    worker.start()
    assert transport.entered.wait(timeout=5)

    sdk.set_network("testnet")
    sdk.set_headers({"X-New": "1"})
    transport.release.set()
    worker.join(timeout=5)

    assert result["items"] == [{"i": 1}, {"i": 2}]
    for url, headers in transport.calls:
        assert url.startswith(MAINNET_URL)
        assert headers["Authorization"] == "Bearer main-key"

    sdk.get_latest_block()
    url, headers = transport.calls[-1]
    assert url.startswith(TESTNET_URL)
    assert headers == {"X-New": "1", "Content-Type": "application/json"}


def test_paginate_by_operation_name(sdk, transport):
    transport.enqueue(200, envelope(page([{"i": 1}, {"i": 2}], 1, 1)))

    items = list(sdk.paginate("get_account_token_transfers", accountAddress="0xabc", size=2))

    assert items == [{"i": 1}, {"i": 2}]
    assert transport.urls == [
        f"{MAINNET_URL}api/v1/accounts/0xabc/token-transfers?page=1&size=2"
    ]


def test_paginate_unknown_operation(sdk):
    with pytest.raises(ValueError):
        sdk.paginate("get_everything")


def test_paginate_validates_path_params_before_sending(sdk, transport):
    with pytest.raises(ValidationError) as exc_info:
        list(sdk.paginate("get_transactions_of_block", blockNumber=-1))

    assert exc_info.value.field == "blockNumber"
    assert transport.calls == []


def test_get_blocks_path(sdk, transport):
    sdk.get_blocks(block_number_start=10, block_number_end=20)
    assert transport.urls == [
        f"{MAINNET_URL}api/v1/blocks?page=1&size=20&blockNumberStart=10&blockNumberEnd=20"
    ]


def test_directions_accepts_any_iterable(sdk, transport):
    sdk.get_account_transactions("0xabc", directions=(d for d in ("in", "out")))
    assert "directions=in,out" in transport.urls[0]


def test_set_header_keeps_other_headers(transport):
    sdk = KaiascanSDK(api_key="tok", transport=transport)
    before = sdk.config

    sdk.set_header("X-Trace", "1")
    sdk.get_latest_block()

    _, headers = transport.calls[0]
    assert headers == {
        "Content-Type": "application/json",
        "Authorization": "Bearer tok",
        "X-Trace": "1",
    }
    assert "X-Trace" not in before.headers


def test_direct_config_sends_content_type(transport):
    sdk = KaiascanSDK(ClientConfig(base_url="http://x/", headers={"X-A": "1"}), transport=transport)
    sdk.get_latest_block()

    _, headers = transport.calls[0]
    assert headers["Content-Type"] == "application/json"


def test_explicit_construction_ignores_environment(monkeypatch, transport):
    monkeypatch.setenv("KAIASCAN_TIMEOUT", "soon")

    sdk = KaiascanSDK(ClientConfig.for_network("testnet"), transport=transport)

    assert sdk.base_url == TESTNET_URL
    with pytest.raises(ConfigurationError):
        KaiascanSDK(transport=transport)
