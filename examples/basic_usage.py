#!/usr/bin/env python3
"""
Basic usage example for the SRG20 Token Lookup tool.

Looks up one token, prints its market data and saves its price chart.
Set the explorer and Mobula API keys in the environment or a .env file first.
"""

import sys
from pathlib import Path
sys.path.append(str(Path(__file__).parent.parent))

from srg_lookup.data.lookup import LookupSession, TokenLookup
from srg_lookup.data.processor import DataProcessor, snapshot_rows
from srg_lookup.settings import load_environment
from srg_lookup.visualization.engine import VisualizationEngine


def main(address: str = None, network: str = "BNB"):
    """Run a single token lookup."""
    load_environment()

    if address is None:
        address = input("SRG20 token address: ").strip()

    print("SRG20 Token Lookup - Basic Usage Example")
    print("=" * 50)

    session = LookupSession(TokenLookup())
    state = session.submit(address, network)

    if state.error:
        print(f"\nLookup failed: {state.error}")
        return

    print()
    for label, value in snapshot_rows(state.snapshot):
        print(f"  {label}: {value}")

    summary = DataProcessor().summarize_history(state.history)
    if not summary:
        print("\nNo price history available")
        return

    print(f"\n  History points: {summary['points']}")
    print(f"  Min price: ${summary['min']:.6f}")
    print(f"  Max price: ${summary['max']:.6f}")

    engine = VisualizationEngine()
    fig = engine.create_price_chart(state.history, title=f"{state.snapshot.symbol} Price History")
    output = "price_history.html"
    if engine.export_figure(fig, output, "html"):
        print(f"\nChart saved to {output}")


if __name__ == "__main__":
    main(*sys.argv[1:3])
