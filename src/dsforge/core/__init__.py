"""Core IR, token processing, validation and configuration for dsforge."""
