"""Solana investor agent — market-data actions and autonomous decision loops."""

__version__ = "0.1.0"
