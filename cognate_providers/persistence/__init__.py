"""Persistence layer: SQLite-backed API keys and prompt history."""
