"""Utility helpers for graph-controls."""
