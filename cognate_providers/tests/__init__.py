"""Test suite for cognate_providers."""
