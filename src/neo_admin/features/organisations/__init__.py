"""Admin organisation management feature."""
