"""Core configuration, language and error types."""
