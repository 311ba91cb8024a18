"""Landmap HTTP API."""
