"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any

from flask import Blueprint, current_app, jsonify, request
from loguru import logger
from pydantic import ValidationError

from wealth_forecast.core.forecast import recompute
from wealth_forecast.core.growth import project_growth
from wealth_forecast.core.ping import get_ping_message
from wealth_forecast.core.withdrawal import project_withdrawal
from wealth_forecast.schemas.forecast import (
    ForecastForm,
    GrowthOutcome,
    InvestmentParameters,
    ProjectionStatus,
)
from wealth_forecast.schemas.ping import PingResponse

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("rejected payload on {}: {} error(s)", request.path, exc.error_count())
    detail = exc.errors(include_url=False, include_context=False, include_input=False)
    return jsonify({"detail": detail}), HTTPStatus.BAD_REQUEST


def _json_body() -> Any:
    # unparsable bodies come back as None so pydantic reports them like any other bad payload
    return request.get_json(force=True, silent=True)


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message=get_ping_message(), service="wealth-forecast")
    return jsonify(response.model_dump())


@api_bp.post("/forecast")
def forecast() -> Any:
    """Recompute the forecast screen from the raw form text."""
    form = ForecastForm.model_validate(_json_body())
    settings = current_app.config["FORECAST_SETTINGS"]
    view = recompute(form, settings.max_chart_points)
    return jsonify(view.model_dump(mode="json"))


@api_bp.post("/calc/growth")
def growth() -> Any:
    """Growth projection for typed parameters; projection is null when withheld."""
    params = InvestmentParameters.model_validate(_json_body())
    projection = project_growth(params)
    status = ProjectionStatus.OK if projection is not None else ProjectionStatus.INVALID
    outcome = GrowthOutcome(status=status, projection=projection)
    return jsonify(outcome.model_dump(mode="json"))


@api_bp.post("/calc/withdrawal")
def withdrawal() -> Any:
    """Early-retirement withdrawal projection for typed parameters."""
    params = InvestmentParameters.model_validate(_json_body())
    outcome = project_withdrawal(params)
    return jsonify(outcome.model_dump(mode="json"))
