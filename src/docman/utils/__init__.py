"""Utility helpers for docman."""
