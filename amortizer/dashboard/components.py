"""Result rendering for the calculator page.

Kept apart from the page module so it can be built without a running Dash app.
"""

from dash import html, dcc
import plotly.graph_objects as go

from amortizer.engine.amortization import yearly_summary
from amortizer.engine.formatting import format_currency, format_duration, format_percent
from amortizer.models.results import ExtraPaymentComparison, PaidDownSummary, ScheduleResult

PRIMARY = "#1a1a2e"
ACCENT = "#e94560"
SAVINGS = "#2ecc71"

CARD_STYLE = {
    "backgroundColor": "#f5f5f5",
    "padding": "1rem",
    "borderRadius": "8px",
    "marginBottom": "1.5rem",
}

CELL_STYLE = {"padding": "0.35rem 0.5rem", "textAlign": "right", "borderBottom": "1px solid #eee"}


def metric_card(label, value):
    return html.Div([
        html.Div(value, style={"fontSize": "1.5rem", "fontWeight": "bold"}),
        html.Div(label, style={"fontSize": "0.85rem", "color": "#666"}),
    ], style={
        "backgroundColor": "white",
        "border": "1px solid #ddd",
        "borderRadius": "8px",
        "padding": "1rem 1.5rem",
        "minWidth": "150px",
        "textAlign": "center",
    })


def prompt():
    return html.Div(
        "Enter a loan balance, interest rate and term to see your amortization schedule.",
        style={**CARD_STYLE, "color": "#666", "textAlign": "center"},
    )


def truncated_banner(result: ScheduleResult):
    return html.Div(
        f"This loan is not paid off after {result.payment_count} payments. "
        "The payment does not cover the interest; the schedule below is cut off.",
        style={
            "backgroundColor": "#fdecea", "padding": "0.75rem 1rem",
            "borderRadius": "8px", "marginBottom": "1.5rem", "border": f"1px solid {ACCENT}",
        },
    )


def summary_cards(result: ScheduleResult):
    return html.Div([
        metric_card("Monthly P&I", format_currency(result.monthly_payment)),
        metric_card("Total Monthly Payment", format_currency(result.total_monthly_payment)),
        metric_card("Total Interest", format_currency(result.total_interest)),
        metric_card("Total Paid", format_currency(result.total_paid)),
        metric_card("Payoff Date", result.payoff_date.long_label),
        metric_card("Payoff Time", format_duration(result.payoff_duration)),
    ], style={"display": "flex", "gap": "1rem", "marginBottom": "2rem", "flexWrap": "wrap"})


def paid_down_card(summary: PaidDownSummary):
    return html.Div([
        html.H3("Loan Progress", style={"marginTop": "0"}),
        html.P(f"Original Amount: {format_currency(summary.original_amount)}"),
        html.P(f"Remaining Balance: {format_currency(summary.remaining_balance)}"),
        html.P(
            f"Paid Down So Far: {format_currency(summary.paid_down)} "
            f"({format_percent(summary.paid_down_pct)})",
            style={"fontWeight": "bold"},
        ),
    ], style=CARD_STYLE)


def savings_card(comparison: ExtraPaymentComparison):
    result = comparison.with_extra
    baseline = comparison.baseline
    return html.Div([
        html.H3("Extra Payment Savings", style={"marginTop": "0"}),
        html.Div([
            metric_card("Interest Saved", format_currency(comparison.interest_saved)),
            metric_card("Time Saved", format_duration(comparison.time_saved)),
            metric_card("New Payoff Date", result.payoff_date.long_label),
        ], style={"display": "flex", "gap": "1rem", "flexWrap": "wrap", "marginBottom": "1rem"}),
        html.P(
            f"Total interest {format_currency(result.total_interest)} vs "
            f"{format_currency(baseline.total_interest)} · "
            f"Total paid {format_currency(result.total_paid)} vs "
            f"{format_currency(baseline.total_paid)} · "
            f"{result.payment_count} vs {baseline.payment_count} payments "
            f"(payoff {baseline.payoff_date.long_label} without extra payments)"
        ),
        html.P(
            f"By paying an extra {format_currency(result.monthly_extra)}/month starting "
            f"{result.extra_start_date.long_label}, you save "
            f"{format_currency(comparison.interest_saved)} in interest and pay off your loan "
            f"{format_duration(comparison.time_saved, long=True)} early.",
            style={"fontWeight": "bold", "color": "#1e8449"},
        ),
    ], style={**CARD_STYLE, "backgroundColor": "#eafaf1", "border": f"1px solid {SAVINGS}"})


def balance_figure(result: ScheduleResult, baseline: ScheduleResult | None = None):
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=[r.payment_date.short_label for r in result.rows],
        y=[float(r.ending_balance) for r in result.rows],
        mode="lines",
        name="Balance",
        line=dict(color=PRIMARY, width=3),
    ))
    if baseline is not None:
        fig.add_trace(go.Scatter(
            x=[r.payment_date.short_label for r in baseline.rows],
            y=[float(r.ending_balance) for r in baseline.rows],
            mode="lines",
            name="Without Extra Payments",
            line=dict(color=ACCENT, width=2, dash="dash"),
        ))
    fig.update_layout(title="Remaining Balance", xaxis_title="Payment", yaxis_title="$", hovermode="x unified")
    return fig


def yearly_figure(result: ScheduleResult):
    yearly = yearly_summary(result)
    years = [y.year for y in yearly]
    fig = go.Figure()
    fig.add_trace(go.Bar(x=years, y=[float(y.principal) for y in yearly], name="Principal", marker_color=PRIMARY))
    fig.add_trace(go.Bar(x=years, y=[float(y.interest) for y in yearly], name="Interest", marker_color=ACCENT))
    fig.update_layout(title="Principal vs Interest by Year", barmode="stack", xaxis_title="Year", yaxis_title="$")
    return fig


def schedule_table(result: ScheduleResult):
    headers = [
        "#", "Date", "Beginning Balance", "Payment", "Principal",
        "Interest", "Extra", "Ending Balance", "Cumulative Interest",
    ]
    table_header = html.Tr([html.Th(h, style=CELL_STYLE) for h in headers])
    table_rows = [
        html.Tr([
            html.Td(r.payment_number, style=CELL_STYLE),
            html.Td(r.payment_date.short_label, style=CELL_STYLE),
            html.Td(format_currency(r.beginning_balance), style=CELL_STYLE),
            html.Td(format_currency(r.total_payment), style=CELL_STYLE),
            html.Td(format_currency(r.principal), style=CELL_STYLE),
            html.Td(format_currency(r.interest), style=CELL_STYLE),
            html.Td(format_currency(r.extra_payment) if r.extra_payment > 0 else "-", style=CELL_STYLE),
            html.Td(format_currency(r.ending_balance), style=CELL_STYLE),
            html.Td(format_currency(r.cumulative_interest), style=CELL_STYLE),
        ])
        for r in result.rows
    ]
    return html.Table(
        [html.Thead(table_header), html.Tbody(table_rows)],
        style={"width": "100%", "borderCollapse": "collapse", "fontSize": "0.9rem"},
    )


def build_results(
    result: ScheduleResult | None,
    comparison: ExtraPaymentComparison | None = None,
    paid_down: PaidDownSummary | None = None,
):
    if result is None:
        return prompt()

    children = []
    if not result.converged:
        children.append(truncated_banner(result))
    children.append(summary_cards(result))
    if paid_down is not None:
        children.append(paid_down_card(paid_down))
    if comparison is not None:
        children.append(savings_card(comparison))

    baseline = comparison.baseline if comparison is not None else None
    children.extend([
        html.Div([
            html.Div(
                [html.Span("Total Taxes: "), html.Strong(format_currency(result.total_tax))],
                style={"marginRight": "2rem"},
            ),
            html.Div([html.Span("Total Paid: "), html.Strong(format_currency(result.total_paid))]),
        ], style={"display": "flex", "marginBottom": "1rem"}),
        html.Div([
            dcc.Graph(figure=balance_figure(result, baseline), style={"width": "50%"}),
            dcc.Graph(figure=yearly_figure(result), style={"width": "50%"}),
        ], style={"display": "flex", "gap": "1rem"}),
        html.H3("Amortization Schedule", style={"marginTop": "2rem"}),
        schedule_table(result),
    ])
    return html.Div(children)