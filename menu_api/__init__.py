"""In-memory restaurant menu HTTP service."""
