"""
Reverse proxy resolution API routes.

Endpoint:
- GET /reverse-proxy-resolution/{domain} - Parsed site configuration for a domain
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from nginx_resolver.service import ProxyResolutionService, ResolutionStatus

router = APIRouter()

ERROR_MESSAGES = {
    ResolutionStatus.INVALID_DOMAIN: (400, "Invalid domain"),
    ResolutionStatus.NOT_FOUND: (404, "Domain was not found on proxy server"),
    ResolutionStatus.INTERNAL_ERROR: (500, "Internal server error"),
}


class LocationOut(BaseModel):
    """Proxy settings of a server block."""
    proxy_pass: str
    proxy_set_headers: Dict[str, str]
    proxy_no_cache: str
    proxy_cache_bypass: str
    proxy_connect_timeout: str
    proxy_read_timeout: str


class ServerBlockOut(BaseModel):
    """One server block of the site configuration."""
    location: LocationOut
    server_name: List[str]
    listen: Optional[int] = None


class SiteConfigurationOut(BaseModel):
    """All blocks of a site configuration file with its metadata."""
    blocks: List[ServerBlockOut]
    modification_date: str
    siteConfigurationContents: str


class ResolutionResponse(BaseModel):
    message: SiteConfigurationOut


class ErrorResponse(BaseModel):
    error: str


def get_service(request: Request) -> ProxyResolutionService:
    return request.app.state.resolution_service


@router.get(
    "/reverse-proxy-resolution/{domain}",
    response_model=ResolutionResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_reverse_proxy_resolution(domain: str, request: Request) -> Any:
    """Get the reverse proxy details configured for a domain."""
    resolution = get_service(request).resolve(domain)

    if resolution.found:
        return {"message": resolution.result.to_dict()}

    status_code, error = ERROR_MESSAGES[resolution.status]
    return JSONResponse(status_code=status_code, content={"error": error})
