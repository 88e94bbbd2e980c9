from __future__ import annotations

from math import isclose

import pytest

from wealth_forecast.core.growth import chart_series, compound, decimate, project_growth
from wealth_forecast.schemas.forecast import InvestmentParameters


def make_params(**overrides) -> InvestmentParameters:
    values = {
        "currentAge": 30,
        "retirementAge": 32,
        "currentInvestment": 1000.0,
        "yearlyInvestment": 0.0,
        "expectedReturn": 0.0,
    }
    values.update(overrides)
    return InvestmentParameters(**values)


def pairs(projection) -> list:
    return [(point.age, point.balance) for point in projection.series]


def test_zero_return_keeps_balance_flat():
    projection = project_growth(make_params())

    assert pairs(projection) == [(30, 1000), (31, 1000), (32, 1000)]
    assert projection.finalAmount == 1000
    assert projection.totalContributions == 1000
    assert projection.totalGrowth == 0


def test_single_year_at_ten_percent():
    projection = project_growth(make_params(retirementAge=31, expectedReturn=0.10))

    assert [point.age for point in projection.series] == [30, 31]
    assert projection.series[0].balance == 1000
    assert isclose(projection.series[1].balance, 1100.0)
    assert isclose(projection.finalAmount, 1100.0)


def test_contribution_added_after_growth():
    """
    The yearly contribution lands after that year's growth, so it earns nothing until the next year.
    """
    projection = project_growth(
        make_params(retirementAge=32, currentInvestment=0.0, yearlyInvestment=100.0, expectedReturn=0.10)
    )

    balances = [point.balance for point in projection.series]
    assert isclose(balances[1], 100.0)
    assert isclose(balances[2], 210.0)
    assert isclose(projection.totalContributions, 200.0)
    assert isclose(projection.totalGrowth, 10.0)


def test_compound_recurrence():
    assert isclose(compound(1000.0, 0.07, 500.0), 1570.0)
    assert compound(1000.0, 0.0, 0.0) == 1000.0


@pytest.mark.parametrize(
    "yearly, rate",
    [(0.0, 0.0), (5000.0, 0.0), (0.0, 0.07), (12000.0, 0.05), (250.0, 0.25)],
)
def test_series_non_decreasing_for_non_negative_inputs(yearly, rate):
    projection = project_growth(
        make_params(currentAge=25, retirementAge=65, currentInvestment=20000.0, yearlyInvestment=yearly, expectedReturn=rate)
    )

    balances = [point.balance for point in projection.series]
    assert len(balances) == 41
    assert all(later >= earlier for earlier, later in zip(balances, balances[1:]))


@pytest.mark.parametrize("retirement_age", [30, 29, 18])
def test_retirement_not_after_current_age_is_withheld(retirement_age):
    assert project_growth(make_params(retirementAge=retirement_age)) is None


def test_fractional_ages_follow_whole_year_steps():
    projection = project_growth(make_params(currentAge=30.5, retirementAge=32, yearlyInvestment=100.0))

    assert [point.age for point in projection.series] == [30.5, 31.5]
    assert isclose(projection.totalContributions, 1000.0 + 100.0 * 1.5)


def test_summary_totals_use_full_series():
    projection = project_growth(
        make_params(currentAge=25, retirementAge=55, currentInvestment=50000.0, yearlyInvestment=20000.0, expectedReturn=0.07)
    )

    assert len(projection.series) == 31
    assert projection.finalAmount == projection.series[-1].balance
    assert isclose(projection.totalContributions, 50000.0 + 20000.0 * 30)
    assert isclose(projection.totalGrowth, projection.finalAmount - projection.totalContributions)


def test_decimate_fifteen_points_keeps_every_second():
    kept = decimate(list(range(15)))

    assert kept == [0, 2, 4, 6, 8, 10, 12, 14]


def test_decimate_short_series_untouched():
    assert decimate(list(range(10))) == list(range(10))
    assert decimate([]) == []


def test_decimate_step_rounds_up():
    assert decimate(list(range(21))) == [0, 3, 6, 9, 12, 15, 18]


def test_chart_labels_and_values_decimated_in_lockstep():
    projection = project_growth(make_params(currentAge=30, retirementAge=44, yearlyInvestment=1000.0, expectedReturn=0.05))
    chart = chart_series(projection)

    assert chart.labels == ["30", "32", "34", "36", "38", "40", "42", "44"]
    assert chart.values == [projection.series[index].balance for index in range(0, 15, 2)]
    assert len(chart.valueLabels) == len(chart.values)
    assert chart.valueLabels[0] == "$1K"
