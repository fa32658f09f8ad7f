"""Bundled practice topics (JSON)."""
