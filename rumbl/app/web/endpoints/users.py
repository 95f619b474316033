"""
User pages.

``index`` lists every user with a link to its detail page; ``show``
renders a single user.  Both pages share the ``users/_user.html``
partial and extend the application layout.
"""

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import HTMLResponse

from rumbl.app.services.user_service import UserService

router = APIRouter()


@router.get("", response_class=HTMLResponse, name="user_index")
async def index(request: Request) -> HTMLResponse:
    """Render the listing of all users."""
    users = await UserService.list_users()
    return request.app.state.templates.TemplateResponse(
        request, "users/index.html", {"users": users}
    )


@router.get("/{user_id}", response_class=HTMLResponse, name="user_show")
async def show(request: Request, user_id: str) -> HTMLResponse:
    """Render a single user.

    Unknown ids raise a 404, which the application renders with the
    ``errors/404.html`` template.
    """
    user = await UserService.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return request.app.state.templates.TemplateResponse(
        request, "users/show.html", {"user": user}
    )
