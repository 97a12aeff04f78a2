"""
Permissive CORS headers.

Every response carries the same three headers, errors included, and any
OPTIONS request is answered directly as a preflight. Starlette's
CORSMiddleware only decorates requests that send an Origin header, which is
not enough for clients that inspect error responses.
"""
from typing import Dict

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from aspiro.core.config import settings


def cors_headers() -> Dict[str, str]:
    return {
        "Access-Control-Allow-Origin": settings.cors_allow_origin,
        "Access-Control-Allow-Headers": settings.cors_allow_headers,
        "Access-Control-Allow-Methods": settings.cors_allow_methods,
    }


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Answer preflight requests and stamp CORS headers on every response."""

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=cors_headers())

        response = await call_next(request)
        response.headers.update(cors_headers())
        return response
