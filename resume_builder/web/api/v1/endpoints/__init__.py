"""Web API v1 endpoint routers."""
