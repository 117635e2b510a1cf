"""Grocery inventory records, file storage, sales and stock reports, and an interactive menu."""

__version__ = "0.1.0"