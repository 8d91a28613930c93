"""Organisation routers."""
