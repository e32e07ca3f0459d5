"""
Visualization engine for token price charts.

This module builds the interactive price history chart shown by the web
dashboard and exported by the CLI.
"""

import logging
from typing import Any, Dict, Optional, Union

import plotly.graph_objects as go
import plotly.io as pio

from ..data.models import PriceHistory
from ..data.processor import DataProcessor
from ..settings import load_config

logger = logging.getLogger(__name__)


class VisualizationEngine:
    """Main visualization engine for creating charts."""

    def __init__(self, config: Union[str, Dict[str, Any], None] = "config.yaml"):
        """
        Initialize the VisualizationEngine.

        Args:
            config: Path to configuration file, or an already loaded config
        """
        self.config = config if isinstance(config, dict) else load_config(config)
        self.processor = DataProcessor()
        self._setup_theme()
        logger.info("VisualizationEngine initialized")

    def _setup_theme(self):
        """Setup Plotly theme."""
        theme = self.config["visualization"]["theme"]
        if theme in pio.templates:
            pio.templates.default = theme
        else:
            logger.warning(f"Unknown Plotly theme {theme}, keeping {pio.templates.default}")

    def create_empty_chart(self, message: str) -> go.Figure:
        """Figure carrying only a centred message."""
        fig = go.Figure()
        fig.add_annotation(
            text=message,
            xref="paper", yref="paper",
            x=0.5, y=0.5, showarrow=False
        )
        fig.update_xaxes(visible=False)
        fig.update_yaxes(visible=False)
        return fig

    def create_price_chart(
        self,
        history: PriceHistory,
        title: str = "Price History"
    ) -> go.Figure:
        """
        Create an interactive price line chart.

        Args:
            history: Price points, plotted in the given order
            title: Chart title

        Returns:
            Plotly figure object
        """
        if not history:
            return self.create_empty_chart("No price history available")

        viz = self.config["visualization"]
        df = self.processor.price_history_to_frame(history)

        fig = go.Figure()
        fig.add_trace(
            go.Scatter(
                x=df["date"],
                y=df["price"],
                mode="lines",
                name="Price (USD)",
                line=dict(color=viz["line_color"], width=2, shape="spline"),
                fill="tozeroy",
                fillcolor=viz["fill_color"],
                hovertemplate="Date: %{x|%Y-%m-%d}<br>Price: $%{y}<extra></extra>"
            )
        )

        fig.update_layout(
            title=title,
            xaxis_title="Date",
            yaxis_title="Price (USD)",
            hovermode="x unified",
            height=viz["default_height"],
            showlegend=True
        )

        return fig

    def export_figure(
        self,
        fig: go.Figure,
        filepath: str,
        format: Optional[str] = None
    ) -> bool:
        """
        Export a Plotly figure to file.

        Args:
            fig: Plotly figure object
            filepath: Path to save the file
            format: Export format (png, svg, pdf, html)

        Returns:
            True if successful, False otherwise
        """
        if format is None:
            format = self.config["visualization"]["export"]["format"]

        try:
            if format == "html":
                fig.write_html(filepath)
            elif format in ["png", "svg", "pdf"]:
                fig.write_image(filepath, format=format)
            else:
                logger.error(f"Unsupported export format: {format}")
                return False
        except Exception as e:
            logger.error(f"Error exporting figure: {e}")
            return False

        logger.info(f"Figure exported to {filepath}")
        return True
