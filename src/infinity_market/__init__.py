"""Infinity Market: valuation and content generation for tokenized websites."""

__version__ = "0.1.0"
