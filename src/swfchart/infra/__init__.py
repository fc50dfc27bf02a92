"""Logging and configuration infrastructure."""
