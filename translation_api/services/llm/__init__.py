"""LLM provider interface and the Gemini implementation."""
