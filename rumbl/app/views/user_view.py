"""
Template helpers for rendering users.
"""

from ..schemas.user import User


def first_name(user: User) -> str:
    """Return the first whitespace-delimited word of ``user.name``.

    Missing or blank names render as an empty string.
    """
    parts = (user.name or "").split()
    return parts[0] if parts else ""
