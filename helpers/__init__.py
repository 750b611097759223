"""Shared helpers with no project dependencies."""
