import pytest

from kaiascan_sdk.config import APISettings, ClientConfig, Network, build_headers
from kaiascan_sdk.core.exceptions import ConfigurationError

from conftest import MAINNET_URL, TESTNET_URL


@pytest.mark.parametrize(
    "value, expected",
    [
        (Network.MAINNET, Network.MAINNET),
        ("mainnet", Network.MAINNET),
        ("MAINNET", Network.MAINNET),
        ("8217", Network.MAINNET),
        (8217, Network.MAINNET),
        (False, Network.MAINNET),
        ("testnet", Network.TESTNET),
        ("kairos", Network.TESTNET),
        ("1001", Network.TESTNET),
        (1001, Network.TESTNET),
        (True, Network.TESTNET),
    ],
)
def test_network_resolve(value, expected):
    assert Network.resolve(value) is expected


def test_unknown_network():
    with pytest.raises(ConfigurationError):
        Network.resolve("goerli")


def test_network_presets():
    mainnet = ClientConfig.for_network("mainnet")
    testnet = ClientConfig.for_network("testnet")

    assert (mainnet.base_url, mainnet.chain_id) == (MAINNET_URL, "8217")
    assert (testnet.base_url, testnet.chain_id) == (TESTNET_URL, "1001")


def test_base_url_gets_trailing_slash():
    config = ClientConfig.for_network("mainnet", base_url="http://localhost:8080")
    assert config.base_url == "http://localhost:8080/"
    assert config.chain_id == "8217"


def test_empty_base_url_is_rejected():
    with pytest.raises(ConfigurationError):
        ClientConfig(base_url="")


def test_headers_cannot_be_mutated_in_place():
    source = {"Content-Type": "application/json"}
    config = ClientConfig(base_url=MAINNET_URL, headers=source)
    source["X-Later"] = "1"

    assert "X-Later" not in config.headers
    with pytest.raises(TypeError):
        config.headers["X-Other"] = "1"


def test_build_headers():
    assert build_headers() == {"Content-Type": "application/json"}
    assert build_headers(api_key="tok") == {
        "Content-Type": "application/json",
        "Authorization": "Bearer tok",
    }
    assert build_headers(headers={"X-Custom": "1"}) == {
        "X-Custom": "1",
        "Content-Type": "application/json",
    }


def test_with_headers_replaces_wholesale():
    config = ClientConfig.for_network("mainnet", api_key="tok")
    updated = config.with_headers({"X-Custom": "1"})

    assert "Authorization" not in updated.headers
    assert config.headers["Authorization"] == "Bearer tok"


def test_with_network_keeps_headers():
    config = ClientConfig.for_network("mainnet", api_key="tok").with_network("testnet")

    assert config.base_url == TESTNET_URL
    assert config.chain_id == "1001"
    assert config.headers["Authorization"] == "Bearer tok"


def test_api_settings_from_env(monkeypatch):
    monkeypatch.setenv("KAIASCAN_API_KEY", "env-key")
    monkeypatch.setenv("KAIASCAN_NETWORK", "testnet")
    monkeypatch.setenv("KAIASCAN_TIMEOUT", "12.5")
    monkeypatch.setenv("KAIASCAN_RATE_LIMIT", "4")

    api_settings = APISettings()

    assert api_settings.api_key == "env-key"
    assert api_settings.network == "testnet"
    assert api_settings.timeout == 12.5
    assert api_settings.rate_limit == 4.0


def test_api_settings_defaults():
    api_settings = APISettings()

    assert api_settings.api_key is None
    assert api_settings.network == "mainnet"
    assert api_settings.timeout == 30.0
    assert api_settings.rate_limit is None


def test_api_settings_rejects_bad_number(monkeypatch):
    monkeypatch.setenv("KAIASCAN_TIMEOUT", "soon")
    with pytest.raises(ConfigurationError):
        APISettings()


def test_direct_config_always_has_content_type():
    config = ClientConfig(base_url="http://x/", headers={"X-A": "1"})
    assert config.headers == {"X-A": "1", "Content-Type": "application/json"}


def test_direct_config_keeps_custom_content_type():
    config = ClientConfig(base_url="http://x/", headers={"Content-Type": "text/plain"})
    assert config.headers["Content-Type"] == "text/plain"


def test_with_header_merges_one_header():
    config = ClientConfig.for_network("mainnet", api_key="tok")
    updated = config.with_header("X-Trace", "1")

    assert updated.headers["X-Trace"] == "1"
    assert updated.headers["Authorization"] == "Bearer tok"
    assert "X-Trace" not in config.headers
