"""Shared pytest fixtures for SRG20 token lookup tests.

HTTP is never performed: every test gets a ``requests.Session`` mock whose
``get`` is routed by URL to canned responses.
"""

from typing import Any, Callable, Dict, List, Optional
from unittest.mock import MagicMock

import pytest
import requests

from srg_lookup.data.lookup import TokenLookup
from srg_lookup.settings import load_config

MARKER_ABI = '[{"inputs":[],"name":"amountSRGLiq","outputs":[{"type":"uint256"}],"type":"function"}]'
PLAIN_ABI = '[{"inputs":[],"name":"totalSupply","outputs":[{"type":"uint256"}],"type":"function"}]'

METADATA = {
    "data": {
        "name": "Surge Token",
        "symbol": "srg",
        "market_cap": 1234567.89,
        "volume_24h": 45678.4,
        "liquidity": 98765.5,
        "circulating_supply": 900000,
        "total_supply": 1000000,
        "max_supply": 1000000,
        "price": 2.5,
    }
}

HISTORY = {"data": {"price_history": [[1690000000000, 1.23], [1690086400000, 1.31]]}}


def make_response(status_code: int = 200, payload: Any = None, json_error: Exception = None) -> MagicMock:
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


class RoutedSession:
    """Builds a session mock answering ``get`` by URL fragment."""

    def __init__(self, routes: Dict[str, Any]):
        self.routes = routes
        self.session = MagicMock(spec=requests.Session)
        self.session.get.side_effect = self._get

    def _get(self, url, params=None, headers=None, timeout=None):
        for fragment, outcome in self.routes.items():
            if fragment in url:
                if isinstance(outcome, Exception):
                    raise outcome
                return outcome
        raise AssertionError(f"Unexpected request to {url}")

    def urls(self) -> List[str]:
        return [call.args[0] for call in self.session.get.call_args_list]

    def calls_to(self, fragment: str) -> int:
        return sum(1 for url in self.urls() if fragment in url)


@pytest.fixture(autouse=True)
def api_keys(monkeypatch):
    """Deterministic credentials for every test."""
    monkeypatch.setenv("BSCSCAN_API_KEY", "bsc-key")
    monkeypatch.setenv("ETHERSCAN_API_KEY", "eth-key")
    monkeypatch.setenv("ARBISCAN_API_KEY", "arb-key")
    monkeypatch.setenv("MOBULA_API_KEY", "mobula-key")


@pytest.fixture
def config() -> Dict[str, Any]:
    return load_config(None)


@pytest.fixture
def routed_session() -> Callable[..., RoutedSession]:
    """Factory for a routed session; defaults to a fully successful lookup."""

    def _build(
        explorer: Any = None,
        metadata: Any = None,
        history: Any = None,
    ) -> RoutedSession:
        return RoutedSession({
            "/metadata": metadata if metadata is not None else make_response(200, METADATA),
            "/market/history": history if history is not None else make_response(200, HISTORY),
            "api": explorer if explorer is not None else make_response(200, {"status": "1", "result": MARKER_ABI}),
        })

    return _build


@pytest.fixture
def make_lookup(config) -> Callable[[RoutedSession], TokenLookup]:
    def _build(routed: RoutedSession, overrides: Optional[Dict[str, Any]] = None) -> TokenLookup:
        cfg = dict(config, **(overrides or {}))
        return TokenLookup(cfg, session=routed.session)

    return _build
