"""User configuration."""
