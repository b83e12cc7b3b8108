"""Gemini text-to-speech playground: HTTP forwarder, WAV builder and client."""

__version__ = "0.1.0"
