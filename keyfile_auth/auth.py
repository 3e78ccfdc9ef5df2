"""
API key auth middleware backed by a KeyStorePort.
Requests under the protected prefixes need a Bearer token or an API key header.
"""

import logging
from typing import Iterable, Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from keyfile_auth.ports.key_store import KeyStorePort

logger = logging.getLogger(__name__)


def _extract_api_key(request: Request, header_name: str) -> Optional[str]:
    auth = request.headers.get("authorization", "")
    if auth.startswith("Bearer "):
        token = auth[7:].strip()
        if token:
            return token
    key = request.headers.get(header_name, "").strip()
    return key or None


def _client_host(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for", "").split(",")[0].strip()
    if forwarded:
        return forwarded
    return request.client.host if request.client else ""


class AuthMiddleware(BaseHTTPMiddleware):
    def __init__(
        self,
        app: ASGIApp,
        key_store: KeyStorePort,
        auth_prefixes: Iterable[str] = ("/",),
        open_paths: Iterable[str] = (),
        header_name: str = "x-api-key",
    ):
        super().__init__(app)
        self._key_store = key_store
        self._auth_prefixes = tuple(auth_prefixes)
        self._open_paths = set(open_paths)
        self._header_name = header_name.lower()

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if path in self._open_paths or not any(path.startswith(p) for p in self._auth_prefixes):
            return await call_next(request)

        # Allow OPTIONS (CORS preflight)
        if request.method == "OPTIONS":
            return await call_next(request)

        api_key = _extract_api_key(request, self._header_name)
        if api_key is None:
            return JSONResponse(status_code=401, content={"detail": "Missing API key"})

        if not self._key_store.is_api_key_valid(api_key):
            logger.warning(f"Invalid API key from {_client_host(request)} for {path}")
            return JSONResponse(status_code=401, content={"detail": "Invalid API key"})

        return await call_next(request)
