"""Configuration loading, path discovery, and derived settings."""
