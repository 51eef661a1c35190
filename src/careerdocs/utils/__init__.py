"""Shared helpers: typed errors, logging and date formatting."""
