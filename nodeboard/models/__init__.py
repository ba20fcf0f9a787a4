"""Data models for the node dashboard."""
