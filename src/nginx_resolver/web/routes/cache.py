"""
Cache flush API route.

Endpoint:
- GET /flush-nginx-cache - Disabled

Flushing the nginx cache needs an nginx restart, and this service has no
authentication to guard one. The route only reports failure and never
runs a command.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

router = APIRouter()


@router.get("/flush-nginx-cache")
def flush_nginx_cache() -> JSONResponse:
    """Report that the cache flush is unavailable."""
    return JSONResponse(status_code=500, content={"error": "Failed to flush Nginx Cache"})
