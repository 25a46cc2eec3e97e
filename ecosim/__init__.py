"""Predator-prey ecosystem simulation with weather-driven resources and a pygame window."""

__version__ = "0.1.0"