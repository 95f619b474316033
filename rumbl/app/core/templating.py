"""
Jinja2 template environment shared by the page routes.

``build_templates`` wraps FastAPI's ``Jinja2Templates`` and registers the
view helpers as template globals, so templates can call
``first_name(user)`` directly.
"""

from fastapi.templating import Jinja2Templates

from ..views.user_view import first_name


def build_templates(directory: str) -> Jinja2Templates:
    """Create the template renderer for ``directory``."""
    templates = Jinja2Templates(directory=directory)
    templates.env.globals["first_name"] = first_name
    return templates
