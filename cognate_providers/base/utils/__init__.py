"""Small shared helpers for the base layer."""
