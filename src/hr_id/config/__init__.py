"""Configuration: settings discovery and structured logging."""
