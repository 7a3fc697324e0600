"""Web API v1."""
