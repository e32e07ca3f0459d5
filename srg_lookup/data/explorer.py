"""
Block-explorer client used to check that a contract is an SRG20 token.

The check fetches the contract ABI published on the explorer (``getabi``)
and looks for a marker that only SRG20 contracts expose.
"""

import logging
from typing import Any, Optional

import requests

from ..exceptions import FetchError, NotSRG20Error
from .networks import NetworkEndpoints

logger = logging.getLogger(__name__)

SRG20_MARKER = "amountSRGLiq"


def abi_has_marker(abi_result: Any, marker: str = SRG20_MARKER) -> bool:
    """Return True when the explorer ``result`` text contains ``marker``."""
    if not abi_result or not isinstance(abi_result, str):
        return False
    return marker in abi_result


class ExplorerClient:
    """Fetches contract ABIs from Etherscan-compatible explorers."""

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = 10):
        """
        Initialize the ExplorerClient.

        Args:
            session: HTTP session to issue requests with
            timeout: Per-request timeout in seconds
        """
        self.session = session or requests.Session()
        self.timeout = timeout

    def get_abi(self, endpoints: NetworkEndpoints, address: str, api_key: str) -> Any:
        """
        Fetch the ``result`` field of a ``getabi`` call.

        Raises:
            FetchError: On transport failure, timeout or an undecodable body
        """
        params = dict(endpoints.explorer_params)
        params.update({
            "module": "contract",
            "action": "getabi",
            "address": address,
            "apikey": api_key,
        })

        try:
            response = self.session.get(endpoints.explorer_url, params=params, timeout=self.timeout)
            payload = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Explorer request failed for {endpoints.network.value}: {e}")
            raise FetchError(str(e)) from e

        if not isinstance(payload, dict):
            return None
        if payload.get("status") == "0":
            logger.info(f"Explorer returned {payload.get('message')}: {payload.get('result')}")
        return payload.get("result")

    def verify_srg20(self, endpoints: NetworkEndpoints, address: str, api_key: str) -> None:
        """
        Gate a lookup on the SRG20 marker being present in the contract ABI.

        Raises:
            FetchError: If the explorer could not be reached
            NotSRG20Error: If the marker is absent
        """
        abi_result = self.get_abi(endpoints, address, api_key)
        if not abi_has_marker(abi_result):
            logger.info(f"{address} on {endpoints.network.value} is not an SRG20 contract")
            raise NotSRG20Error()
        logger.debug(f"{address} on {endpoints.network.value} passed the SRG20 check")
