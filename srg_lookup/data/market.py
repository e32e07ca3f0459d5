"""
Mobula market-data client.

Fetches token metadata (price, market cap, supply...) and the historical
price series for a token on a given blockchain.
"""

import json
import logging
from typing import Any, Dict, Optional

import requests

from ..exceptions import FetchError, UpstreamError
from .models import PriceHistory, TokenSnapshot, price_history_from_pairs

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.mobula.io/api/1"


class MobulaClient:
    """Client for the Mobula REST API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = 10
    ):
        """
        Initialize the MobulaClient.

        Args:
            api_key: Mobula API key, sent as the Authorization header
            base_url: API root, without trailing slash
            session: HTTP session to issue requests with
            timeout: Per-request timeout in seconds
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "accept": "application/json",
            "Authorization": self.api_key,
        }

    def _get(self, path: str, chain_id: str, address: str, not_ok_message: str) -> Dict[str, Any]:
        url = f"{self.base_url}/{path}"
        params = {"blockchain": chain_id, "asset": address}

        try:
            response = self.session.get(url, params=params, headers=self.headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Mobula request to {path} failed: {e}")
            raise FetchError(str(e)) from e

        if not 200 <= response.status_code < 300:
            logger.warning(f"Mobula {path} returned HTTP {response.status_code} for {address}")
            raise UpstreamError(not_ok_message)

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(f"Mobula {path} returned an undecodable body: {e}")
            raise FetchError(str(e)) from e

        return payload if isinstance(payload, dict) else {}

    def get_metadata(self, chain_id: str, address: str) -> TokenSnapshot:
        """
        Fetch token metadata.

        Raises:
            UpstreamError: On a non-2xx response ("Token not found")
            FetchError: On transport failure or an undecodable body
        """
        payload = self._get("metadata", chain_id, address, "Mobula API: Token not found")
        logger.debug(f"Mobula metadata for {address}: {json.dumps(payload, default=str)}")
        return TokenSnapshot.from_payload(payload.get("data"))

    def get_price_history(self, chain_id: str, address: str) -> PriceHistory:
        """
        Fetch the historical price series; a missing series yields ``()``.

        Raises:
            UpstreamError: On a non-2xx response
            FetchError: On transport failure or an undecodable body
        """
        payload = self._get(
            "market/history", chain_id, address, "Mobula API: Unable to fetch historical data"
        )
        data = payload.get("data")
        history = price_history_from_pairs(data.get("price_history") if isinstance(data, dict) else None)
        logger.info(f"Got {len(history)} price history points for {address}")
        return history
