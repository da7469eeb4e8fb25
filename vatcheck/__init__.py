"""Offline validation of VAT and tax identification numbers for many countries."""

__version__ = "0.1.0"