"""Versioned API routers."""
