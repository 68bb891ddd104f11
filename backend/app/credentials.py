"""Per-user credential lookup backed by the user_profiles table."""

import logging

from sqlalchemy.orm import Session

from .models import UserProfile

logger = logging.getLogger(__name__)


class ProfileCredentialStore:
    """Callable credential store: ``store(user_id) -> api_key | None``."""

    def __init__(self, db: Session):
        self.db = db

    def __call__(self, user_id: str) -> str | None:
        profile = self.db.get(UserProfile, user_id)
        if profile is None:
            logger.debug("No profile for user %s", user_id)
            return None
        return profile.api_key or None
