"""Configuration — section models, file discovery, settings, and logging."""
