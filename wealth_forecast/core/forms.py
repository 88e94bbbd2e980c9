"""Turning the raw text of the input form into typed parameters."""

from __future__ import annotations

import math
from typing import Optional

from loguru import logger
from pydantic import ValidationError

from wealth_forecast.schemas.forecast import ForecastForm, InvestmentParameters


def parse_number(text: Optional[str]) -> Optional[float]:
    """Parse a free-text decimal; None for empty, non-numeric or non-finite text."""
    if text is None:
        return None
    stripped = text.strip()
    if not stripped:
        return None
    try:
        value = float(stripped)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_percent(text: Optional[str]) -> Optional[float]:
    value = parse_number(text)
    return value / 100 if value is not None else None


def to_parameters(form: ForecastForm) -> Optional[InvestmentParameters]:
    """
    Build InvestmentParameters from the form, or None if a required field
    does not parse. The withdrawal fields are optional here; whether they are
    needed depends on the selected mode and is decided by the withdrawal
    projection.
    """
    required = {
        "currentAge": parse_number(form.currentAge),
        "retirementAge": parse_number(form.retirementAge),
        "currentInvestment": parse_number(form.currentInvestment),
        "yearlyInvestment": parse_number(form.yearlyInvestment),
        "expectedReturn": parse_percent(form.expectedReturn),
    }
    missing = [name for name, value in required.items() if value is None]
    if missing:
        logger.debug("form incomplete, unparsable fields: {}", ", ".join(missing))
        return None

    try:
        return InvestmentParameters(
            **required,
            withdrawalMode=form.withdrawalType,
            withdrawalRate=parse_percent(form.withdrawalRate),
            withdrawalAmount=parse_number(form.withdrawalAmount),
        )
    except ValidationError as exc:
        logger.debug("form figures out of range: {}", exc.errors())
        return None
