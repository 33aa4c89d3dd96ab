"""REST API for Infinity Market."""
