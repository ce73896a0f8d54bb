"""Utility helpers for logging and settings."""
