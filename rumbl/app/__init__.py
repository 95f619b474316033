"""
Application package initializer.

The project is organised into small layers: ``schemas`` holds the
record definitions, ``services`` the lookup logic, ``views`` the
template helpers, ``web`` the HTML page routes and ``api`` the
versioned JSON routes.  Templates live in ``templates`` and every page
extends ``layout.html``.
"""

from .main import app  # noqa: F401
