"""User routers."""
