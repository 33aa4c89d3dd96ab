"""Core services: valuation, tool materialization, content synthesis and generation."""
