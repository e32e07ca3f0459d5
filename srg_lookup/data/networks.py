"""
Supported networks and their endpoint table.

Each network selector maps to exactly one explorer endpoint, one explorer
credential and one Mobula blockchain identifier. The table is closed: a
selector outside :class:`Network` is rejected.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union

from ..exceptions import UnsupportedNetworkError
from ..settings import DEFAULT_CONFIG

logger = logging.getLogger(__name__)


class Network(str, Enum):
    """Network selector offered to the user."""

    BNB = "BNB"
    ETH = "ETH"
    ARB = "ARB"


@dataclass(frozen=True)
class NetworkEndpoints:
    """Endpoints and credentials resolved for one network."""

    network: Network
    explorer_url: str
    api_key_env: str
    chain_id: str
    explorer_params: Dict[str, Any] = field(default_factory=dict)


def parse_network(value: Union[Network, str, None]) -> Network:
    """
    Convert a user-facing selector into a :class:`Network`.

    Raises:
        UnsupportedNetworkError: If the selector is not one of BNB, ETH, ARB
    """
    if isinstance(value, Network):
        return value
    try:
        return Network(str(value).strip().upper())
    except ValueError:
        raise UnsupportedNetworkError() from None


def build_network_table(config: Optional[Dict[str, Any]] = None) -> Dict[Network, NetworkEndpoints]:
    """
    Build the selector -> endpoints mapping from the ``networks`` config section.

    Args:
        config: Full configuration dictionary; defaults are used when omitted

    Returns:
        Mapping with an entry for every :class:`Network` member
    """
    networks = (config or DEFAULT_CONFIG).get("networks", {})

    for name in networks:
        if name not in Network.__members__:
            logger.warning(f"Ignoring unsupported network in config: {name}")

    table = {}
    for network in Network:
        entry = networks.get(network.value) or DEFAULT_CONFIG["networks"][network.value]
        table[network] = NetworkEndpoints(
            network=network,
            explorer_url=entry["explorer_url"],
            api_key_env=entry["api_key_env"],
            chain_id=entry["chain_id"],
            explorer_params=dict(entry.get("explorer_params") or {}),
        )
    return table
