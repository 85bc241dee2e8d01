"""CORS headers and last-resort error handling for every response"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware

from inspiration_list.errors import InternalError

logger = logging.getLogger(__name__)

CORS_ALLOW_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
CORS_ALLOW_HEADERS = "Content-Type, Authorization"
CORS_MAX_AGE = "86400"


def cors_headers(allow_origin: str = "*") -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Methods": CORS_ALLOW_METHODS,
        "Access-Control-Allow-Headers": CORS_ALLOW_HEADERS,
        "Access-Control-Max-Age": CORS_MAX_AGE,
    }


class CorsMiddleware(BaseHTTPMiddleware):
    """Adds CORS headers to every response and answers preflight requests.

    Unlike Starlette's CORSMiddleware the headers are sent whether or not the
    request carries an Origin header. Any exception escaping the app is
    logged and turned into a generic 500 so error responses keep the
    headers too.
    """

    def __init__(self, app, allow_origin: str = "*"):
        super().__init__(app)
        self.headers = cors_headers(allow_origin)

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.method == "OPTIONS":
            response = Response(status_code=204)
        else:
            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(f"Unhandled error on {request.method} {request.url.path}: {e}", exc_info=True)
                response = JSONResponse(status_code=500, content=InternalError().to_dict())

        response.headers.update(self.headers)
        return response
