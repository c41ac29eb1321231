"""Configuration package for icsgen."""
