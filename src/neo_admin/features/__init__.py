"""Admin API features."""
