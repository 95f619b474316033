"""
Business logic for users.

The ``UserService`` keeps a hard-coded list of users in memory and
provides read-only lookups over it.  Every lookup is a linear scan; a
miss is reported as ``None`` and it is up to the caller to turn that
into an error response.
"""

import logging
from typing import Any, List, Mapping, Optional

from ..schemas.user import User

logger = logging.getLogger(__name__)


SEED_USERS = (
    User(id="1", name="José", username="josevalim"),
    User(id="2", name="Bruce", username="redrapids"),
    User(id="3", name="Chris", username="chrismccord"),
)


class UserService:
    """Read-only access to the seeded users."""

    @classmethod
    async def list_users(cls) -> List[User]:
        """Return all users in insertion order.

        A new list is returned on each call; the records themselves are
        frozen, so callers cannot alter the seed data.
        """
        return list(SEED_USERS)

    @classmethod
    async def get_user(cls, user_id: str) -> Optional[User]:
        """Return the first user whose ``id`` equals ``user_id``, or ``None``."""
        logger.debug("Looking up user %s", user_id)
        for user in await cls.list_users():
            if user.id == user_id:
                return user
        logger.info("User %s not found", user_id)
        return None

    @classmethod
    async def get_user_by(
        cls, criteria: Optional[Mapping[str, Any]] = None, **fields: Any
    ) -> Optional[User]:
        """Return the first user matching every criterion, or ``None``.

        Criteria may be given as a mapping, as keyword arguments or
        both; keyword arguments win on conflicting keys.  A field the
        record does not have reads as ``None``.  Empty criteria match
        the first user.
        """
        params = dict(criteria or {})
        params.update(fields)
        logger.debug("Looking up user by %s", params)
        for user in await cls.list_users():
            record = user.model_dump()
            if all(record.get(key) == value for key, value in params.items()):
                return user
        logger.info("No user matches %s", params)
        return None
