"""Tests for network selector resolution."""

import pytest

from srg_lookup.data.networks import Network, build_network_table, parse_network
from srg_lookup.exceptions import UnsupportedNetworkError


class TestNetworkTable:
    """Tests for the selector -> endpoints mapping."""

    @pytest.mark.parametrize("network", list(Network))
    def test_every_selector_resolves(self, config, network):
        """Test each selector has an explorer URL, key variable and chain id."""
        endpoints = build_network_table(config)[network]

        assert endpoints.network is network
        assert endpoints.explorer_url.startswith("https://")
        assert endpoints.api_key_env
        assert endpoints.chain_id

    def test_chain_identifiers(self, config):
        """Test selectors map to Mobula blockchain names."""
        table = build_network_table(config)

        assert table[Network.BNB].chain_id == "bnb"
        assert table[Network.ETH].chain_id == "eth"
        assert table[Network.ARB].chain_id == "arbitrum"

    def test_eth_uses_etherscan_v2(self, config):
        """Test Ethereum goes through the v2 API with chainid=1."""
        endpoints = build_network_table(config)[Network.ETH]

        assert endpoints.explorer_url == "https://api.etherscan.io/v2/api"
        assert endpoints.explorer_params == {"chainid": 1}

    def test_table_is_closed(self, config):
        """Test unknown networks in config are ignored."""
        config["networks"]["SOL"] = {
            "explorer_url": "https://example.invalid",
            "api_key_env": "SOL_KEY",
            "chain_id": "solana",
        }

        table = build_network_table(config)

        assert set(table) == set(Network)

    def test_config_overrides_endpoint(self, config):
        """Test a network entry from config replaces the default."""
        config["networks"]["ARB"]["explorer_url"] = "https://arb.example/api"

        assert build_network_table(config)[Network.ARB].explorer_url == "https://arb.example/api"

    def test_defaults_without_config(self):
        """Test the built-in table is used when no config is given."""
        assert len(build_network_table()) == 3


class TestParseNetwork:
    """Tests for selector parsing."""

    def test_enum_passthrough(self):
        assert parse_network(Network.ETH) is Network.ETH

    @pytest.mark.parametrize("value", ["bnb", "BNB", " Bnb "])
    def test_case_insensitive(self, value):
        assert parse_network(value) is Network.BNB

    @pytest.mark.parametrize("value", ["SOL", "", "polygon"])
    def test_unsupported(self, value):
        with pytest.raises(UnsupportedNetworkError) as exc:
            parse_network(value)

        assert exc.value.message == "ABI check for this network is not supported."
