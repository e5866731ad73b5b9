"""Configuration and file-export adapters."""
