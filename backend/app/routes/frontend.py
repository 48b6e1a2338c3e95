"""
Notes App Backend — Front-End Hosting
=======================================

What:  Serves the compiled single-page client from settings.static_dir.
How:   Any GET that no API route claimed resolves to a file inside the build
       directory; unknown paths fall back to index.html so client-side routes
       work on reload. Paths under /api/ are never rewritten: a trailing slash
       redirects (307) to the slashless path, anything else 404s as JSON.
When:  Only registered when the build directory exists (see main.create_app).
"""

import logging
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse, RedirectResponse, Response

from app.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

INDEX_FILE = "index.html"


def build_frontend_router(static_dir: str) -> APIRouter:
    """
    Create the catch-all router for a client build directory.

    Must be included after every API router; its path pattern matches
    everything.
    """
    root = Path(static_dir).resolve()
    router = APIRouter(tags=["Frontend"], include_in_schema=False)

    @router.get("/{file_path:path}")
    async def serve_frontend(request: Request, file_path: str) -> Response:
        if file_path == "api" or file_path.startswith("api/"):
            # Same trailing-slash redirect the router gives when no client build is served
            if file_path.endswith("/"):
                target = request.url.replace(path="/" + file_path.rstrip("/"))
                return RedirectResponse(url=str(target), status_code=307)
            raise NotFoundError(resource="endpoint", resource_id=f"/{file_path}")

        full_path = (root / file_path).resolve()

        # Ensure the resolved path stays inside the build directory
        if full_path != root and root not in full_path.parents:
            raise ValidationError(message="Invalid file path")

        if file_path and full_path.is_file():
            return FileResponse(path=str(full_path))

        index = root / INDEX_FILE
        if not index.is_file():
            raise NotFoundError(resource="file", resource_id=INDEX_FILE)
        return FileResponse(path=str(index), headers={"Cache-Control": "no-cache"})

    logger.info("Serving front end from %s", root)
    return router
