"""CORS headers and the catch-all error boundary."""

from fastapi import Request
from fastapi.responses import JSONResponse, Response
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
    "Access-Control-Max-Age": "86400",
}


class DeepLinkMiddleware(BaseHTTPMiddleware):
    """
    Answers CORS preflight, attaches CORS headers to every response and
    turns any unhandled exception into a 500 JSON body without a traceback.
    """

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=CORS_HEADERS)

        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception(f"Unhandled error for {request.method} {request.url.path}")
            response = JSONResponse(
                {"error": "Internal Server Error", "message": str(e)},
                status_code=500,
            )

        response.headers.update(CORS_HEADERS)
        return response
