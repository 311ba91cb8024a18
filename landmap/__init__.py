"""Landmap - place, annotate and browse landmarks on an interactive map."""

__version__ = "0.1.0"
