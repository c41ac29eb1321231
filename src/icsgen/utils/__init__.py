"""Utility helpers for icsgen."""
