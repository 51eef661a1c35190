"""Readers for generated content payloads."""
