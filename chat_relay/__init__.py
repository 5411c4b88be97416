"""Relay chat messages from a browser to the Gemini API."""
