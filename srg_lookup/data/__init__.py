"""Network resolution, API clients and the lookup workflow."""

from .lookup import LookupSession, TokenLookup
from .networks import Network
from .processor import DataProcessor

__all__ = ["TokenLookup", "LookupSession", "Network", "DataProcessor"]
