"""API routers for the hatchery backend."""
