"""
Session gate for the admin dashboard.
"""
import logging
from urllib.parse import urlencode

from fastapi.responses import RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from auth import extract_token, verify_token

logger = logging.getLogger(__name__)

LOGIN_PATH = "/login"
PROTECTED_PREFIX = "/dashboard"

# Always reachable, even under the protected prefix
PUBLIC_PATHS = (LOGIN_PATH, "/admin/login", "/admin/logout", "/admin/verify")
PUBLIC_PREFIXES = ("/static/",)

NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, proxy-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


def is_public(path: str) -> bool:
    if path in PUBLIC_PATHS or path.startswith(PUBLIC_PREFIXES):
        return True
    return not (path == PROTECTED_PREFIX or path.startswith(PROTECTED_PREFIX + "/"))


class AdminSessionMiddleware(BaseHTTPMiddleware):
    """Redirect dashboard requests without a valid session to the login page."""

    def __init__(self, app, secret: str = None):
        super().__init__(app)
        self.secret = secret

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        path = request.url.path
        if is_public(path):
            return await call_next(request)

        token = extract_token(request)
        if not token or verify_token(token, self.secret) is None:
            logger.info("Unauthenticated request to %s, redirecting to login", path)
            return RedirectResponse(f"{LOGIN_PATH}?{urlencode({'redirect': path})}")

        response = await call_next(request)
        response.headers.update(NO_CACHE_HEADERS)
        return response
