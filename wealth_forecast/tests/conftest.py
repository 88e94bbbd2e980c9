from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from wealth_forecast.app import create_app
from wealth_forecast.config import Settings
from wealth_forecast.core.forecast import clear_cache


@pytest.fixture()
def app() -> Flask:
    return create_app(Settings(log_level="WARNING"))


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def fresh_forecast_cache():
    clear_cache()
    yield
    clear_cache()
