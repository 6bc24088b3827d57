"""
Campaign Registry - vaccination campaign registration ledger

Records vaccination campaigns submitted by verified authorities,
enforces field validation and authorization rules, charges a creation
fee to a configured beneficiary, and maintains a region index of
campaign identifiers.

Operations are applied as sequential, totally ordered transactions.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
