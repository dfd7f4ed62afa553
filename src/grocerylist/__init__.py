"""Grocery list aggregation across recipes."""

__version__ = "0.1.0"
