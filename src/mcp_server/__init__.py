"""MCP server exposing the AI search pipeline."""
