"""Investment growth and early-retirement withdrawal forecasts."""

__version__ = "0.1.0"
