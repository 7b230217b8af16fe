"""Ledger analytics: trends, comparisons, budgets and activity over a transaction ledger."""

__version__ = "0.1.0"
