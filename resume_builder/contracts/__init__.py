"""Request/response contracts shared by the web layer."""
