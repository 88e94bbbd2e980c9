"""Recompute the whole forecast screen from one snapshot of the form."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from loguru import logger

from wealth_forecast.core.forms import to_parameters
from wealth_forecast.core.formatting import format_age, format_currency, format_percent
from wealth_forecast.core.growth import DEFAULT_MAX_CHART_POINTS, chart_series, project_growth
from wealth_forecast.core.withdrawal import PENSION_ACCESS_AGE, project_withdrawal
from wealth_forecast.schemas.forecast import (
    EarlyRetirementView,
    ForecastForm,
    ForecastView,
    GrowthSummary,
    GrowthView,
    InvestmentParameters,
    ProjectionStatus,
    WithdrawalMode,
    WithdrawalProjection,
)

PLACEHOLDER_TEXT = "Fill in your information above to see your wealth forecast"
DEPLETION_WARNING = (
    f"Warning: Your funds may be depleted before age {PENSION_ACCESS_AGE}. "
    "Consider reducing your withdrawal rate or increasing your retirement age."
)


def describe_scenario(params: InvestmentParameters, projection: WithdrawalProjection) -> str:
    if projection.withdrawalMode == WithdrawalMode.PERCENTAGE:
        withdrawal = f"{format_percent(params.withdrawalRate)} annually"
    else:
        withdrawal = f"{format_currency(projection.annualWithdrawal)} per year"
    return (
        f"If you retire at age {format_age(params.retirementAge)} and withdraw {withdrawal} "
        f"until you can access your pension at {PENSION_ACCESS_AGE}:"
    )


def build_view(
    params: Optional[InvestmentParameters],
    max_chart_points: int = DEFAULT_MAX_CHART_POINTS,
) -> ForecastView:
    if params is None:
        return ForecastView(placeholder=PLACEHOLDER_TEXT, withdrawalStatus=ProjectionStatus.INVALID)
    return _cached_view(params, max_chart_points)


@lru_cache(maxsize=128)
def _cached_view(params: InvestmentParameters, max_chart_points: int) -> ForecastView:
    growth_view = None
    placeholder = PLACEHOLDER_TEXT
    growth = project_growth(params)
    if growth is not None:
        placeholder = None
        growth_view = GrowthView(
            chart=chart_series(growth, max_chart_points),
            summary=GrowthSummary(
                finalAmount=format_currency(growth.finalAmount),
                totalContributions=format_currency(growth.totalContributions),
                totalGrowth=format_currency(growth.totalGrowth),
            ),
            projection=growth,
        )

    outcome = project_withdrawal(params)
    early_view = None
    if outcome.projection is not None:
        projection = outcome.projection
        early_view = EarlyRetirementView(
            description=describe_scenario(params, projection),
            balanceAtRetirement=format_currency(projection.balanceAtRetirement),
            annualWithdrawal=format_currency(projection.annualWithdrawal),
            balanceAtFiftyFive=format_currency(projection.balanceAtFiftyFive),
            solvent=not projection.depleted,
            warning=DEPLETION_WARNING if projection.depleted else None,
            projection=projection,
        )

    return ForecastView(
        growth=growth_view,
        placeholder=placeholder,
        withdrawalStatus=outcome.status,
        earlyRetirement=early_view,
    )


def recompute(form: ForecastForm, max_chart_points: int = DEFAULT_MAX_CHART_POINTS) -> ForecastView:
    """Input-event handler: parse the full form and derive a fresh view."""
    params = to_parameters(form)
    view = build_view(params, max_chart_points)
    logger.debug(
        "forecast recomputed: growth={} withdrawal={}",
        "shown" if view.growth else "placeholder",
        view.withdrawalStatus.value,
    )
    return view


def clear_cache() -> None:
    _cached_view.cache_clear()
