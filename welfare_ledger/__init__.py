"""Membership payment ledger for a mutual-aid welfare group."""

__version__ = "0.1.0"
