"""
Web interface for the SRG20 token lookup tool using Dash.

This module provides the single-page dashboard: pick a network, enter a
token address, and see its market data and price history.
"""

import logging
from typing import Any, Dict, List, Union

import dash
from dash import dcc, html, Input, Output, State
import dash_bootstrap_components as dbc
import plotly.graph_objects as go

from ..data.lookup import LookupSession, TokenLookup
from ..data.models import LookupState
from ..data.networks import Network
from ..data.processor import snapshot_rows
from ..settings import load_config, load_environment
from ..visualization.engine import VisualizationEngine

logger = logging.getLogger(__name__)

HIDDEN = {"display": "none"}
VISIBLE = {"display": "block"}


def render_error(state: LookupState) -> List[Any]:
    if not state.error:
        return []
    return [dbc.Alert(state.error, color="danger", className="mb-0")]


def render_token_info(state: LookupState) -> List[Any]:
    """Token info card body for a lookup state."""
    if state.snapshot is None:
        return [html.P("No token loaded", className="text-muted")]

    rows = snapshot_rows(state.snapshot)
    name = rows[0][1]
    return [html.H2(name, className="card-title")] + [
        html.P([html.Strong(f"{label}: "), value]) for label, value in rows[1:]
    ]


class TokenLookupDashboard:
    """Interactive web dashboard for SRG20 token lookups."""

    def __init__(self, config: Union[str, Dict[str, Any], None] = "config.yaml", lookup: TokenLookup = None):
        """
        Initialize the dashboard.

        Args:
            config: Path to configuration file, or an already loaded config
            lookup: Lookup workflow to use; built from config when omitted
        """
        self.config = config if isinstance(config, dict) else load_config(config)

        self.lookup = lookup or TokenLookup(self.config)
        self.engine = VisualizationEngine(self.config)

        self.app = dash.Dash(
            __name__,
            external_stylesheets=[dbc.themes.DARKLY],
            title="Mobula Token Info"
        )

        self._setup_layout()
        self._setup_callbacks()

        logger.info("Dashboard initialized")

    def _setup_layout(self):
        """Setup the dashboard layout."""
        self.app.layout = dbc.Container([
            dbc.Row([
                dbc.Col([
                    html.H1("Mobula Token Info", className="mt-3 mb-4")
                ])
            ]),

            dbc.Row([
                dbc.Col([
                    dcc.Dropdown(
                        id="network-dropdown",
                        options=[{"label": n.value, "value": n.value} for n in Network],
                        value=Network.BNB.value,
                        clearable=False
                    )
                ], width=2),
                dbc.Col([
                    dbc.Input(
                        id="address-input",
                        type="text",
                        placeholder="Enter SRG20 token address only",
                        debounce=False
                    )
                ], width=6),
                dbc.Col([
                    dbc.Button("Fetch Data", id="fetch-button", color="primary")
                ], width=2)
            ], className="mb-4"),

            dcc.Loading(
                id="loading-lookup",
                children=[
                    html.Div(id="error-display", className="mb-3"),

                    dbc.Card([
                        dbc.CardBody(
                            id="token-info-display",
                            children=[html.P("No token loaded", className="text-muted")]
                        )
                    ], className="mb-4"),

                    html.Div(id="chart-container", style=HIDDEN, children=[
                        html.H3("Price History"),
                        dcc.Graph(id="price-chart", config={"displayModeBar": True})
                    ])
                ]
            )
        ], fluid=True)

    def _setup_callbacks(self):
        """Setup dashboard callbacks."""

        @self.app.callback(
            [Output("error-display", "children"),
             Output("token-info-display", "children"),
             Output("price-chart", "figure"),
             Output("chart-container", "style")],
            [Input("fetch-button", "n_clicks"),
             Input("address-input", "n_submit")],
            [State("address-input", "value"),
             State("network-dropdown", "value")],
            prevent_initial_call=True
        )
        def fetch_token_data(n_clicks, n_submit, address, network):
            """Run a lookup and render its outcome."""
            return self.render(self.submit(address, network))

    def submit(self, address, network) -> LookupState:
        """Run one lookup in a fresh session."""
        session = LookupSession(self.lookup)
        try:
            return session.submit(address, network)
        except Exception as e:
            logger.error(f"Unexpected error during lookup: {e}", exc_info=True)
            return LookupState(error=str(e))

    def render(self, state: LookupState):
        """Map a lookup state onto the dashboard outputs."""
        if state.has_chart:
            symbol = state.snapshot.symbol if state.snapshot and state.snapshot.symbol else "Token"
            figure = self.engine.create_price_chart(state.history, title=f"{symbol} Price History")
            style = VISIBLE
        else:
            figure = go.Figure()
            style = HIDDEN

        return render_error(state), render_token_info(state), figure, style

    def run(self, debug: bool = False, port: int = None):
        """
        Run the dashboard server.

        Args:
            debug: Whether to run in debug mode
            port: Port to run the server on
        """
        web_config = self.config["web_interface"]
        self.app.run(debug=debug, host=web_config["host"], port=port or web_config["port"])


def main():
    """Main entry point for the web interface."""
    import argparse

    parser = argparse.ArgumentParser(description="SRG20 Token Lookup Web Dashboard")
    parser.add_argument("--config", "-c", default="config.yaml", help="Config file path")
    parser.add_argument("--port", "-p", type=int, default=None, help="Port to run on")
    parser.add_argument("--debug", "-d", action="store_true", help="Run in debug mode")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    load_environment()

    dashboard = TokenLookupDashboard(args.config)
    port = args.port or dashboard.config["web_interface"]["port"]

    print("Starting SRG20 Token Lookup Dashboard...")
    print(f"Access the dashboard at: http://{dashboard.config['web_interface']['host']}:{port}")

    dashboard.run(debug=args.debug, port=port)


if __name__ == "__main__":
    main()
