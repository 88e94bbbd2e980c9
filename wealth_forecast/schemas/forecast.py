"""Data contracts for the growth and early-retirement projections."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

MAX_AGE = 150


class WithdrawalMode(str, Enum):
    PERCENTAGE = "percentage"
    AMOUNT = "amount"


class ProjectionStatus(str, Enum):
    OK = "ok"
    SKIPPED = "skipped"
    INVALID = "invalid"


class InvestmentParameters(BaseModel):
    """One snapshot of the user's figures; rates are fractions (0.07 for 7%)."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    currentAge: float = Field(gt=0, le=MAX_AGE)
    retirementAge: float = Field(gt=0, le=MAX_AGE)
    currentInvestment: float = Field(ge=0)
    yearlyInvestment: float
    expectedReturn: float
    withdrawalMode: WithdrawalMode = WithdrawalMode.PERCENTAGE
    withdrawalRate: Optional[float] = None
    withdrawalAmount: Optional[float] = None


class GrowthPoint(BaseModel):
    model_config = ConfigDict(extra="forbid")

    age: float
    balance: float


class GrowthProjection(BaseModel):
    """Full yearly series; summary totals are computed from it, never from a decimated copy."""

    model_config = ConfigDict(extra="forbid")

    series: List[GrowthPoint]
    finalAmount: float
    totalContributions: float
    totalGrowth: float


class WithdrawalProjection(BaseModel):
    model_config = ConfigDict(extra="forbid")

    withdrawalMode: WithdrawalMode
    withdrawalYears: float
    balanceAtRetirement: float
    # first-year figure; under percentage mode later withdrawals shrink with the balance
    annualWithdrawal: float
    balanceAtFiftyFive: float
    totalWithdrawn: float

    @property
    def depleted(self) -> bool:
        return self.balanceAtFiftyFive <= 0


class WithdrawalOutcome(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: ProjectionStatus
    projection: Optional[WithdrawalProjection] = None


class GrowthOutcome(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: ProjectionStatus
    projection: Optional[GrowthProjection] = None


class ForecastForm(BaseModel):
    """Raw text of the input form. Percent fields hold percentages ("7" for 7%)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    currentAge: str = ""
    retirementAge: str = ""
    currentInvestment: str = ""
    yearlyInvestment: str = ""
    expectedReturn: str = "7"
    withdrawalRate: str = "4"
    withdrawalAmount: str = ""
    withdrawalType: WithdrawalMode = WithdrawalMode.PERCENTAGE


class ChartData(BaseModel):
    model_config = ConfigDict(extra="forbid")

    labels: List[str]
    values: List[float]
    valueLabels: List[str]


class GrowthSummary(BaseModel):
    model_config = ConfigDict(extra="forbid")

    finalAmount: str
    totalContributions: str
    totalGrowth: str


class GrowthView(BaseModel):
    model_config = ConfigDict(extra="forbid")

    chart: ChartData
    summary: GrowthSummary
    projection: GrowthProjection


class EarlyRetirementView(BaseModel):
    model_config = ConfigDict(extra="forbid")

    description: str
    balanceAtRetirement: str
    annualWithdrawal: str
    balanceAtFiftyFive: str
    solvent: bool
    warning: Optional[str] = None
    projection: WithdrawalProjection


class ForecastView(BaseModel):
    """Everything a renderer needs after one input event."""

    model_config = ConfigDict(extra="forbid")

    growth: Optional[GrowthView] = None
    placeholder: Optional[str] = None
    withdrawalStatus: ProjectionStatus
    earlyRetirement: Optional[EarlyRetirementView] = None
