import logging
from typing import Optional

from careers.domain.models import User
from careers.infrastructure.persistence.in_memory_repo import InMemoryRecordStore

logger = logging.getLogger(__name__)


def authenticate(
    store: InMemoryRecordStore,
    username: Optional[str],
    password: Optional[str],
) -> Optional[User]:
    """
    One-shot credential check: look the user up by name and compare the
    password by plain equality. Returns the user on success, None otherwise
    (including when either credential is missing).

    No session or token is issued.
    """
    user = store.get_user_by_username(username)
    if user is None or user.password != password:
        logger.warning("Failed login for username=%r", username)
        return None
    logger.info("User %s logged in (admin=%s)", user.username, user.admin)
    return user
