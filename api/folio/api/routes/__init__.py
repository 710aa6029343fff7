"""Route modules for the API router."""
