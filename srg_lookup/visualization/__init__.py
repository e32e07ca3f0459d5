"""Chart building for token lookup results."""

from .engine import VisualizationEngine

__all__ = ["VisualizationEngine"]
