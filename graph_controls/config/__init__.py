"""Configuration for graph-controls."""
