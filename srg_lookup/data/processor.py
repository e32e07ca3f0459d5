"""
Data processing module for turning lookup results into display values.

This module provides the formatting helpers shared by the web dashboard and
the CLI, and the conversion of a price history into a DataFrame.
"""

import logging
import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd

from .models import PriceHistory, TokenSnapshot

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"


def _to_decimal(value: Any) -> Optional[Decimal]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    return number if number.is_finite() else None


def format_usd(value: Any) -> str:
    """
    Format a number as whole US dollars, e.g. ``1234.5 -> "$1,235"``.

    Missing or non-numeric values render as "N/A"; zero renders as "$0".
    """
    number = _to_decimal(value)
    if number is None:
        return NOT_AVAILABLE

    with localcontext() as ctx:
        ctx.prec = max(28, number.adjusted() + 2)
        dollars = int(number.quantize(Decimal(1), rounding=ROUND_HALF_UP))
    sign = "-" if dollars < 0 else ""
    return f"{sign}${abs(dollars):,}"


def calculate_fdv(price: Any, max_supply: Any) -> str:
    """Fully-diluted value (price x max supply), or "N/A" if either is missing."""
    if not price or not max_supply:
        return NOT_AVAILABLE

    price_value = _to_decimal(price)
    supply_value = _to_decimal(max_supply)
    if price_value is None or supply_value is None:
        return NOT_AVAILABLE
    with localcontext() as ctx:
        # Product is exact at this precision
        ctx.prec = max(28, len(price_value.as_tuple().digits) + len(supply_value.as_tuple().digits))
        fdv = price_value * supply_value
    return format_usd(fdv)


def format_supply(value: Any) -> str:
    if value is None or value == "":
        return NOT_AVAILABLE
    return str(value)


def snapshot_rows(snapshot: TokenSnapshot) -> List[Tuple[str, str]]:
    """
    Display rows for a token snapshot, in the order both front ends show them.

    The "Max Supply" row shows ``total_supply``; ``max_supply`` only feeds
    the FDV.
    """
    symbol = snapshot.symbol.upper() if isinstance(snapshot.symbol, str) else format_supply(snapshot.symbol)
    return [
        ("Name", format_supply(snapshot.name)),
        ("Symbol", symbol),
        ("Market Cap (USD)", format_usd(snapshot.market_cap)),
        ("Volume (24h)", format_usd(snapshot.volume_24h)),
        ("Liquidity", format_usd(snapshot.liquidity)),
        ("Circulating Supply", format_supply(snapshot.circulating_supply)),
        ("Max Supply", format_supply(snapshot.total_supply)),
        ("Current Price (USD)", format_usd(snapshot.price)),
        ("Fully-Diluted Value (FDV)", calculate_fdv(snapshot.price, snapshot.max_supply)),
    ]


class DataProcessor:
    """Transform price histories for charting and export."""

    def price_history_to_frame(self, history: PriceHistory) -> pd.DataFrame:
        """
        Convert a price history into a DataFrame.

        Args:
            history: Price points in upstream order

        Returns:
            DataFrame with ``timestamp``, ``date`` (UTC) and ``price`` columns
        """
        if not history:
            return pd.DataFrame(columns=["timestamp", "date", "price"])

        df = pd.DataFrame(
            [(point.timestamp, point.price) for point in history],
            columns=["timestamp", "price"]
        )
        df["date"] = pd.to_datetime(df["timestamp"], unit="ms", utc=True)
        return df[["timestamp", "date", "price"]]

    def summarize_history(self, history: PriceHistory) -> Dict[str, float]:
        """
        Summary statistics of a price history.

        Returns:
            Dictionary with points, first, last, min, max and change_pct
            (the latter only when the first price is non-zero). Empty for an
            empty history.
        """
        if not history:
            return {}

        prices = pd.to_numeric(pd.Series([point.price for point in history]), errors="coerce")
        first = prices.iloc[0]
        last = prices.iloc[-1]
        summary = {
            "points": len(prices),
            "first": float(first),
            "last": float(last),
            "min": float(prices.min()),
            "max": float(prices.max()),
        }
        if first:
            summary["change_pct"] = float((last - first) / first * 100)
        return summary

    def export_to_csv(
        self,
        df: pd.DataFrame,
        filepath: str,
        index: bool = False
    ) -> bool:
        """
        Export DataFrame to CSV file.

        Args:
            df: DataFrame to export
            filepath: Path to save the CSV file
            index: Whether to include index in export

        Returns:
            True if successful, False otherwise
        """
        try:
            df.to_csv(filepath, index=index)
            logger.info(f"Data exported to {filepath}")
            return True
        except OSError as e:
            logger.error(f"Error exporting to CSV: {e}")
            return False
