"""Shared utilities for the supergroup directory."""
