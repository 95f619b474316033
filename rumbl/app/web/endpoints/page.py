"""
Static pages.
"""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

router = APIRouter()


@router.get("/", response_class=HTMLResponse, name="home")
async def home(request: Request) -> HTMLResponse:
    """Render the welcome page."""
    return request.app.state.templates.TemplateResponse(request, "page/index.html")
