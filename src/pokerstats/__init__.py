"""Poker results pipeline: sheet grid parsing, player summaries and cumulative series."""

__version__ = "0.1.0"
