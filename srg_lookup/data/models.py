"""Value types produced by a token lookup."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PricePoint:
    """One entry of a price history; ``timestamp`` is epoch milliseconds."""

    timestamp: Any
    price: Any


@dataclass(frozen=True)
class TokenSnapshot:
    """Market and metadata fields for one token, as returned by Mobula."""

    name: Optional[str] = None
    symbol: Optional[str] = None
    market_cap: Any = None
    volume_24h: Any = None
    liquidity: Any = None
    circulating_supply: Any = None
    total_supply: Any = None
    max_supply: Any = None
    price: Any = None
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_payload(cls, data: Optional[Dict[str, Any]]) -> "TokenSnapshot":
        """Copy the known fields verbatim from a metadata ``data`` object."""
        data = data if isinstance(data, dict) else {}
        return cls(
            name=data.get("name"),
            symbol=data.get("symbol"),
            market_cap=data.get("market_cap"),
            volume_24h=data.get("volume_24h"),
            liquidity=data.get("liquidity"),
            circulating_supply=data.get("circulating_supply"),
            total_supply=data.get("total_supply"),
            max_supply=data.get("max_supply"),
            price=data.get("price"),
            raw=dict(data),
        )


PriceHistory = Tuple[PricePoint, ...]


def price_history_from_pairs(pairs: Optional[Sequence[Sequence[Any]]]) -> PriceHistory:
    """Map ``[timestamp, price]`` pairs to price points, keeping their order."""
    if not pairs or not isinstance(pairs, (list, tuple)):
        return ()

    points = []
    for pair in pairs:
        if not isinstance(pair, (list, tuple)) or len(pair) < 2:
            logger.warning(f"Skipping malformed price history entry: {pair!r}")
            continue
        points.append(PricePoint(timestamp=pair[0], price=pair[1]))
    return tuple(points)


@dataclass(frozen=True)
class LookupResult:
    """Successful outcome of a lookup."""

    snapshot: TokenSnapshot
    history: PriceHistory = ()


@dataclass(frozen=True)
class LookupState:
    """
    Display state of one session.

    At most one of ``snapshot`` and ``error`` is set. A new value replaces
    the previous one on every attempt.
    """

    snapshot: Optional[TokenSnapshot] = None
    history: PriceHistory = ()
    error: Optional[str] = None

    @property
    def has_chart(self) -> bool:
        return len(self.history) > 0

    def history_pairs(self) -> List[List[Any]]:
        return [[point.timestamp, point.price] for point in self.history]
