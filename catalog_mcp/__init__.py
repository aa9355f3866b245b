"""Catalog search exposed as an MCP tool with an inline results widget."""
