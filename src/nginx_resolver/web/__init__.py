"""Web package - FastAPI surface for nginx-resolver."""
