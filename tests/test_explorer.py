"""Tests for the block-explorer SRG20 check."""

from unittest.mock import MagicMock

import pytest
import requests

from conftest import MARKER_ABI, PLAIN_ABI, make_response
from srg_lookup.data.explorer import ExplorerClient, abi_has_marker
from srg_lookup.data.networks import Network, build_network_table
from srg_lookup.exceptions import FetchError, NotSRG20Error


@pytest.fixture
def endpoints(config):
    return build_network_table(config)


class TestAbiHasMarker:
    """Tests for the marker heuristic."""

    def test_marker_present(self):
        assert abi_has_marker(MARKER_ABI)

    def test_marker_absent(self):
        assert not abi_has_marker(PLAIN_ABI)

    @pytest.mark.parametrize("result", [None, "", ["amountSRGLiq"], 42])
    def test_non_text_results(self, result):
        """Test missing or non-string results fail the check."""
        assert not abi_has_marker(result)

    def test_explorer_error_text(self):
        assert not abi_has_marker("Contract source code not verified")


class TestExplorerClient:
    """Tests for getabi requests."""

    def test_request_parameters(self, endpoints):
        """Test getabi is called with module, action, address and key."""
        session = MagicMock(spec=requests.Session)
        session.get.return_value = make_response(200, {"status": "1", "result": MARKER_ABI})
        client = ExplorerClient(session, timeout=3)

        result = client.get_abi(endpoints[Network.BNB], "0xabc", "bsc-key")

        assert result == MARKER_ABI
        session.get.assert_called_once_with(
            "https://api.bscscan.com/api",
            params={"module": "contract", "action": "getabi", "address": "0xabc", "apikey": "bsc-key"},
            timeout=3,
        )

    def test_eth_includes_chainid(self, endpoints):
        session = MagicMock(spec=requests.Session)
        session.get.return_value = make_response(200, {"result": MARKER_ABI})

        ExplorerClient(session).get_abi(endpoints[Network.ETH], "0xabc", "eth-key")

        assert session.get.call_args.kwargs["params"]["chainid"] == 1

    def test_timeout_is_fetch_error(self, endpoints):
        """Test a timeout surfaces as a transport failure."""
        session = MagicMock(spec=requests.Session)
        session.get.side_effect = requests.Timeout("read timed out")

        with pytest.raises(FetchError) as exc:
            ExplorerClient(session).get_abi(endpoints[Network.ARB], "0xabc", "arb-key")

        assert exc.value.message == "read timed out"

    def test_bad_json_is_fetch_error(self, endpoints):
        session = MagicMock(spec=requests.Session)
        session.get.return_value = make_response(200, json_error=ValueError("Expecting value"))

        with pytest.raises(FetchError) as exc:
            ExplorerClient(session).get_abi(endpoints[Network.BNB], "0xabc", "bsc-key")

        assert "Expecting value" in exc.value.message

    def test_verify_rejects_plain_abi(self, endpoints):
        session = MagicMock(spec=requests.Session)
        session.get.return_value = make_response(200, {"status": "1", "result": PLAIN_ABI})

        with pytest.raises(NotSRG20Error) as exc:
            ExplorerClient(session).verify_srg20(endpoints[Network.BNB], "0xabc", "bsc-key")

        assert exc.value.message == "THIS IS NOT A SRG20 TOKEN"

    def test_verify_rejects_missing_result(self, endpoints):
        session = MagicMock(spec=requests.Session)
        session.get.return_value = make_response(200, {"status": "0", "message": "NOTOK"})

        with pytest.raises(NotSRG20Error):
            ExplorerClient(session).verify_srg20(endpoints[Network.BNB], "0xabc", "bsc-key")

    def test_verify_accepts_marker(self, endpoints):
        session = MagicMock(spec=requests.Session)
        session.get.return_value = make_response(200, {"status": "1", "result": MARKER_ABI})

        assert ExplorerClient(session).verify_srg20(endpoints[Network.ARB], "0xabc", "arb-key") is None
