# pharmacy_http_api/routers/pages.py

"""
Fixed HTML pages served from the configured frontend directory.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import FileResponse

PAGES = {
    "/": "index.html",
    "/dashboard": "dashboard.html",
    "/add-medicine": "add-medicine.html",
    "/view-medicines": "view-medicines.html",
    "/billing": "billing.html",
}

router = APIRouter(tags=["pages"], include_in_schema=False)


def _page_endpoint(filename: str):
    def serve_page(request: Request) -> FileResponse:
        path = request.app.state.settings.FRONTEND_DIR / filename
        if not path.is_file():
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Page '{filename}' is not available",
            )
        return FileResponse(path, media_type="text/html")

    serve_page.__name__ = f"page_{filename.replace('-', '_').removesuffix('.html')}"
    return serve_page


for _route, _filename in PAGES.items():
    router.add_api_route(_route, _page_endpoint(_filename), methods=["GET"])
