"""Calculator page: loan inputs, summary, savings vs baseline and the full schedule.

Every input change recomputes through cached_schedule, so toggling back to
a previous set of inputs is free.
"""

import dash
from dash import html, dcc, callback, clientside_callback, Input, Output

from amortizer.dashboard.components import build_results
from amortizer.engine.amortization import cached_schedule
from amortizer.engine.comparison import compare_to_baseline, paid_down_summary
from amortizer.engine.inputs import build_inputs
from amortizer.models.loan import YearMonth

dash.register_page(__name__, path="/", name="Calculator")

BTN_STYLE = {
    "padding": "0.5rem 1.5rem",
    "fontSize": "0.95rem",
    "backgroundColor": "#1a1a2e",
    "color": "white",
    "border": "none",
    "cursor": "pointer",
}

FIELD_STYLE = {"width": "100%", "padding": "0.5rem", "fontSize": "0.95rem"}

FREQUENCY_OPTIONS = [
    {"label": " Monthly", "value": "monthly"},
    {"label": " Annual", "value": "annual"},
]

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


def _field(label, component):
    return html.Div([
        html.Label(label, style={"fontSize": "0.85rem", "marginBottom": "0.25rem", "display": "block"}),
        component,
    ], style={"flex": "1", "minWidth": "140px"})


def _frequency(id_, value):
    return dcc.RadioItems(id=id_, options=FREQUENCY_OPTIONS, value=value, inline=True,
                          style={"fontSize": "0.85rem", "marginTop": "0.25rem"})


def layout():
    this_month = str(YearMonth.today())
    return html.Div([
        html.Div([
            html.H2("Loan Amortization Calculator", style={"margin": "0"}),
            html.Button("Print Schedule", id="print-btn", style=BTN_STYLE),
        ], style={"display": "flex", "justifyContent": "space-between", "alignItems": "center",
                  "marginBottom": "1rem"}),

        html.H4("Loan Details"),
        html.Div([
            _field("Original Loan Amount ($)", dcc.Input(id="original-amount", type="number", value=300000, style=FIELD_STYLE)),
            _field("Remaining Balance ($)", dcc.Input(id="remaining-balance", type="number", value=275000, style=FIELD_STYLE)),
            _field("Interest Rate (%)", dcc.Input(id="interest-rate", type="number", value=6.5, step=0.01, max=100, style=FIELD_STYLE)),
            _field("Loan Term (years)", dcc.Input(id="loan-term", type="number", value=30, max=100, style=FIELD_STYLE)),
            _field("First Payment (YYYY-MM)", dcc.Input(id="start-date", type="text", value=this_month, style=FIELD_STYLE)),
        ], style={"display": "flex", "gap": "1rem", "flexWrap": "wrap", "marginBottom": "1rem"}),

        html.H4("Property Taxes & Extra Payments"),
        html.Div([
            _field("Property Taxes ($)", html.Div([
                dcc.Input(id="tax-amount", type="number", value=3600, style=FIELD_STYLE),
                _frequency("tax-frequency", "annual"),
            ])),
            _field("Extra Payment ($)", html.Div([
                dcc.Input(id="extra-amount", type="number", value=200, style=FIELD_STYLE),
                _frequency("extra-frequency", "monthly"),
            ])),
            _field("Extra Payments Start (YYYY-MM)", dcc.Input(id="extra-start-date", type="text", value=this_month, style=FIELD_STYLE)),
        ], style={"display": "flex", "gap": "1rem", "flexWrap": "wrap", "marginBottom": "2rem"}),

        html.Div(id="results-container"),
        html.Div(id="print-trigger", style={"display": "none"}),
    ])


# ---------------------------------------------------------------------------
# Callbacks
# ---------------------------------------------------------------------------


@callback(
    Output("results-container", "children"),
    [
        Input("original-amount", "value"),
        Input("remaining-balance", "value"),
        Input("interest-rate", "value"),
        Input("loan-term", "value"),
        Input("start-date", "value"),
        Input("tax-amount", "value"),
        Input("tax-frequency", "value"),
        Input("extra-amount", "value"),
        Input("extra-frequency", "value"),
        Input("extra-start-date", "value"),
    ],
)
def update_schedule(
    original, balance, rate, term, start,
    tax, tax_frequency,
    extra, extra_frequency, extra_start,
):
    inputs = build_inputs(
        principal=balance,
        interest_rate_pct=rate,
        term_years=term,
        start_date=start,
        original_amount=original,
        tax_amount=tax,
        tax_frequency=tax_frequency,
        extra_amount=extra,
        extra_frequency=extra_frequency,
        extra_start_date=extra_start,
    )
    result = cached_schedule(inputs)
    comparison = compare_to_baseline(inputs, result) if result is not None else None
    return build_results(result, comparison, paid_down_summary(inputs))


clientside_callback(
    """
    function(n_clicks) {
        if (n_clicks) { window.print(); }
        return "";
    }
    """,
    Output("print-trigger", "children"),
    Input("print-btn", "n_clicks"),
    prevent_initial_call=True,
)
