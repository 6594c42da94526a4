"""Conversion plugins."""
