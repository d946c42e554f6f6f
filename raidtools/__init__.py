"""Raid den helpers: number fields, filters, result tables, den listings and settings."""

__version__ = "0.1.0"