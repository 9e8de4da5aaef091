"""SPA Static Files — serves the prebuilt client bundle with index.html fallback.

Invariants:
    - Existing asset files are served as-is
    - Any other non-API path returns the entry document (client-side routing)
    - Paths under api/ never return the entry document (404 instead)

Design Decisions:
    - Subclass StaticFiles rather than a catch-all route: keeps asset caching
      headers and range support from Starlette
    - Mounted AFTER API routers so /api/* routes take precedence
"""

import os

from starlette.exceptions import HTTPException
from starlette.staticfiles import StaticFiles
from starlette.types import Scope
from starlette.responses import Response

API_PREFIX = "api"
ENTRY_DOCUMENT = "index.html"


def is_api_path(path: str) -> bool:
    """True for mount-relative paths inside the API namespace."""
    return path.replace(os.sep, "/").split("/", 1)[0] == API_PREFIX


class SPAStaticFiles(StaticFiles):
    """StaticFiles that falls back to the entry document for unknown paths."""

    def __init__(self, directory: str):
        super().__init__(directory=directory, html=True)

    async def get_response(self, path: str, scope: Scope) -> Response:
        if is_api_path(path):
            raise HTTPException(status_code=404)
        try:
            return await super().get_response(path, scope)
        except HTTPException as exc:
            if exc.status_code != 404:
                raise
            return await super().get_response(ENTRY_DOCUMENT, scope)
