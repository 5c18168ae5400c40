"""Dash search index storage."""
