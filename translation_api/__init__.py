"""Cached translation service backed by Google Gemini and PostgreSQL."""
