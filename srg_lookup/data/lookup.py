"""
Token lookup workflow.

A lookup resolves the selected network, gates on the SRG20 ABI check, then
fetches Mobula metadata and price history, strictly in that order. Any
failure stops the lookup; the first error is what the user sees.
"""

import logging
from typing import Any, Dict, Optional, Union

import requests

from ..exceptions import TokenLookupError, ValidationError
from ..settings import get_api_key, load_config
from .explorer import ExplorerClient
from .market import MobulaClient
from .models import LookupResult, LookupState
from .networks import Network, NetworkEndpoints, build_network_table, parse_network

logger = logging.getLogger(__name__)


class TokenLookup:
    """Verifies an SRG20 token and aggregates its market data."""

    def __init__(
        self,
        config: Union[str, Dict[str, Any], None] = "config.yaml",
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the TokenLookup.

        Args:
            config: Path to the configuration file, or an already loaded config
            session: HTTP session shared by the explorer and Mobula clients
        """
        self.config = config if isinstance(config, dict) else load_config(config)
        self.session = session or requests.Session()
        self.networks = build_network_table(self.config)

        timeout = self.config["http"]["timeout_seconds"]
        mobula_config = self.config["mobula"]
        self.explorer = ExplorerClient(self.session, timeout=timeout)
        self.market = MobulaClient(
            get_api_key(mobula_config["api_key_env"]),
            base_url=mobula_config["base_url"],
            session=self.session,
            timeout=timeout,
        )

        logger.info(f"TokenLookup initialized for {', '.join(n.value for n in self.networks)}")

    def resolve(self, network: Union[Network, str]) -> NetworkEndpoints:
        """Return the endpoints for a network selector."""
        return self.networks[parse_network(network)]

    def lookup_token(self, address: Optional[str], network: Union[Network, str, None]) -> LookupResult:
        """
        Look up a token by contract address.

        Args:
            address: Token contract address
            network: One of BNB, ETH, ARB

        Returns:
            Token snapshot and price history

        Raises:
            TokenLookupError: Subclass describing the first failure
        """
        address = (address or "").strip()
        if not address or not network:
            raise ValidationError()

        endpoints = self.resolve(network)
        logger.info(f"Looking up {address} on {endpoints.network.value}")

        self.explorer.verify_srg20(endpoints, address, get_api_key(endpoints.api_key_env))
        snapshot = self.market.get_metadata(endpoints.chain_id, address)
        history = self.market.get_price_history(endpoints.chain_id, address)

        return LookupResult(snapshot=snapshot, history=history)


class LookupSession:
    """
    Display state owned by one user session.

    ``submit`` is the only writer: it clears the state before the first
    request and replaces it once the lookup finishes.
    """

    def __init__(self, lookup: TokenLookup):
        self.lookup = lookup
        self.state = LookupState()

    def submit(self, address: Optional[str], network: Union[Network, str, None]) -> LookupState:
        self.state = LookupState()

        try:
            result = self.lookup.lookup_token(address, network)
        except TokenLookupError as e:
            self.state = LookupState(error=e.message)
        else:
            self.state = LookupState(snapshot=result.snapshot, history=result.history)

        return self.state
