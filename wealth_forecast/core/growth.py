"""Year-by-year compounding of an investment balance up to retirement."""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, TypeVar

from loguru import logger

from wealth_forecast.core.formatting import format_age, format_axis_label
from wealth_forecast.schemas.forecast import (
    ChartData,
    GrowthPoint,
    GrowthProjection,
    InvestmentParameters,
)

DEFAULT_MAX_CHART_POINTS = 10

T = TypeVar("T")


def compound(balance: float, rate: float, contribution: float) -> float:
    """One year of growth, then the year's contribution (which earns nothing this year)."""
    return balance * (1 + rate) + contribution


def project_growth(params: InvestmentParameters) -> Optional[GrowthProjection]:
    """
    Build the balance series from currentAge..retirementAge (inclusive).

    Year 0 records the starting balance untouched; every later year applies
    compound(). Returns None when retirementAge does not exceed currentAge.
    """
    if params.retirementAge <= params.currentAge:
        logger.debug(
            "growth projection withheld: retirement age {} <= current age {}",
            params.retirementAge,
            params.currentAge,
        )
        return None

    years = params.retirementAge - params.currentAge

    balance = params.currentInvestment
    series: List[GrowthPoint] = []
    for year in range(math.floor(years) + 1):
        if year > 0:
            balance = compound(balance, params.expectedReturn, params.yearlyInvestment)
        series.append(GrowthPoint(age=params.currentAge + year, balance=balance))

    total_contributions = params.currentInvestment + params.yearlyInvestment * years
    logger.debug("growth projection: {} points, final balance {:.2f}", len(series), balance)

    return GrowthProjection(
        series=series,
        finalAmount=balance,
        totalContributions=total_contributions,
        totalGrowth=balance - total_contributions,
    )


def decimate(items: Sequence[T], max_points: int = DEFAULT_MAX_CHART_POINTS) -> List[T]:
    """Keep every ceil(N / max_points)-th item from index 0 once N exceeds max_points."""
    if len(items) <= max_points:
        return list(items)
    step = math.ceil(len(items) / max_points)
    return [item for index, item in enumerate(items) if index % step == 0]


def chart_series(
    projection: GrowthProjection, max_points: int = DEFAULT_MAX_CHART_POINTS
) -> ChartData:
    # labels and values go through the same decimation so they stay paired
    labels = decimate([format_age(point.age) for point in projection.series], max_points)
    values = decimate([point.balance for point in projection.series], max_points)
    return ChartData(
        labels=labels,
        values=values,
        valueLabels=[format_axis_label(value) for value in values],
    )
