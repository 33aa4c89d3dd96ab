"""MCP server for Infinity Market."""
