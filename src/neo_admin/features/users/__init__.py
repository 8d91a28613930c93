"""Admin user management feature."""
