"""Plotly Dash application: calculator page."""

import sys
from pathlib import Path

# Ensure project root is on sys.path so `amortizer.*` imports work
# even when Dash's reloader spawns a child process.
_project_root = str(Path(__file__).resolve().parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from dash import Dash, html, page_container

from amortizer.config import settings
from amortizer.logging_config import configure_logging

configure_logging()

app = Dash(
    __name__,
    use_pages=True,
    suppress_callback_exceptions=True,
    title="Loan Amortizer",
)

app.layout = html.Div([
    html.Nav([
        html.H1("Loan Amortizer", style={"fontSize": "1.5rem", "margin": "0 auto", "maxWidth": "1200px",
                                         "padding": "0 1rem"}),
    ], style={
        "backgroundColor": "#1a1a2e",
        "color": "white",
        "padding": "1rem 0",
        "marginBottom": "2rem",
    }),

    html.Div(
        page_container,
        style={"maxWidth": "1200px", "margin": "0 auto", "padding": "0 1rem"},
    ),
])


if __name__ == "__main__":
    app.run(debug=settings.debug, port=settings.dashboard_port)
