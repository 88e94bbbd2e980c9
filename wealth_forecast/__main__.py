#setup: pip install -e ".[test]"
#setup: python -m wealth_forecast

from wealth_forecast.app import create_app


def main() -> None:
    app = create_app()
    app.run(port=app.config["FORECAST_SETTINGS"].port, debug=True)


if __name__ == "__main__":
    main()
