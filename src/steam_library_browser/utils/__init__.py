"""Shared formatting helpers."""
