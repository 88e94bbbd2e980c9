"""Early-retirement drawdown between the retirement age and pension access."""

from __future__ import annotations

import math

from loguru import logger

from wealth_forecast.core.growth import compound
from wealth_forecast.schemas.forecast import (
    InvestmentParameters,
    ProjectionStatus,
    WithdrawalMode,
    WithdrawalOutcome,
    WithdrawalProjection,
)

PENSION_ACCESS_AGE = 55


def balance_at_retirement(params: InvestmentParameters) -> float:
    """Accumulate from year 1 with no pass-through year 0."""
    years_to_retirement = params.retirementAge - params.currentAge
    balance = params.currentInvestment
    for _ in range(1, math.floor(years_to_retirement) + 1):
        balance = compound(balance, params.expectedReturn, params.yearlyInvestment)
    return balance


def project_withdrawal(params: InvestmentParameters) -> WithdrawalOutcome:
    """
    Simulate withdrawals from retirementAge up to PENSION_ACCESS_AGE.

    Each withdrawal year applies growth first, then takes the withdrawal:
      - percentage: a fresh share of the grown balance, so it never hits zero
      - amount: a fixed sum; once the balance goes negative it is clamped to
        zero and the remaining years are not simulated

    Skipped when there is no early-retirement window (retirementAge >= 55 or
    currentAge >= retirementAge); invalid when the field for the chosen mode
    is missing.
    """
    if params.currentAge >= params.retirementAge or params.retirementAge >= PENSION_ACCESS_AGE:
        logger.debug("withdrawal projection skipped for retirement age {}", params.retirementAge)
        return WithdrawalOutcome(status=ProjectionStatus.SKIPPED)

    if params.withdrawalMode == WithdrawalMode.PERCENTAGE and params.withdrawalRate is None:
        return WithdrawalOutcome(status=ProjectionStatus.INVALID)
    if params.withdrawalMode == WithdrawalMode.AMOUNT and params.withdrawalAmount is None:
        return WithdrawalOutcome(status=ProjectionStatus.INVALID)

    start_balance = balance_at_retirement(params)
    withdrawal_years = PENSION_ACCESS_AGE - params.retirementAge
    growth = 1 + params.expectedReturn

    balance = start_balance
    years = range(1, math.floor(withdrawal_years) + 1)
    if params.withdrawalMode == WithdrawalMode.PERCENTAGE:
        rate = params.withdrawalRate
        annual_withdrawal = start_balance * rate
        for _ in years:
            balance *= growth
            balance -= balance * rate
    else:
        annual_withdrawal = params.withdrawalAmount
        for year in years:
            balance *= growth
            balance -= annual_withdrawal
            if balance < 0:
                logger.debug("fixed withdrawals exhaust the balance in year {}", year)
                balance = 0.0
                break

    projection = WithdrawalProjection(
        withdrawalMode=params.withdrawalMode,
        withdrawalYears=withdrawal_years,
        balanceAtRetirement=start_balance,
        annualWithdrawal=annual_withdrawal,
        balanceAtFiftyFive=balance,
        totalWithdrawn=annual_withdrawal * withdrawal_years,
    )
    logger.debug(
        "withdrawal projection: {} years, balance at {} is {:.2f}",
        withdrawal_years,
        PENSION_ACCESS_AGE,
        balance,
    )
    return WithdrawalOutcome(status=ProjectionStatus.OK, projection=projection)
