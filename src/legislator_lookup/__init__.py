"""Legislator lookup: resolve an address to its state legislators and their social handles."""

__version__ = "0.1.0"
