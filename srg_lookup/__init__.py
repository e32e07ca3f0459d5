"""
SRG20 Token Lookup

Verifies that a contract is an SRG20 token through its block-explorer ABI
and displays its Mobula market data and price history.
"""

__version__ = "1.0.0"
__author__ = "SRG Token Analytics"

from .data.lookup import LookupSession, TokenLookup
from .visualization.engine import VisualizationEngine

__all__ = ["TokenLookup", "LookupSession", "VisualizationEngine"]
