from dataclasses import replace
from decimal import Decimal

from dash import html

from amortizer.dashboard.components import balance_figure, build_results, schedule_table
from amortizer.engine.amortization import compute_schedule
from amortizer.engine.comparison import compare_to_baseline, paid_down_summary


class TestBuildResults:
    def test_prompt_without_result(self):
        component = build_results(None)
        assert isinstance(component, html.Div)
        assert "Enter a loan balance" in component.children

    def test_full_results(self, refinanced_inputs):
        result = compute_schedule(refinanced_inputs)
        component = build_results(
            result,
            compare_to_baseline(refinanced_inputs, result),
            paid_down_summary(refinanced_inputs),
        )
        assert isinstance(component, html.Div)
        assert isinstance(component.children[-1], html.Table)

    def test_truncated_banner(self, standard_inputs):
        result = replace(compute_schedule(standard_inputs), converged=False)
        first = build_results(result).children[0]
        assert "not paid off" in first.children


class TestScheduleTable:
    def test_one_row_per_payment(self, standard_inputs):
        result = compute_schedule(standard_inputs)
        table = schedule_table(result)
        body = table.children[1]
        assert len(body.children) == 360


class TestBalanceFigure:
    def test_baseline_overlay(self, extra_inputs):
        comparison = compare_to_baseline(extra_inputs)
        fig = balance_figure(comparison.with_extra, comparison.baseline)
        assert len(fig.data) == 2
        assert len(fig.data[1].y) == 360
        assert fig.data[0].y[-1] == 0
