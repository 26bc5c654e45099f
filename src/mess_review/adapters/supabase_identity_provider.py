"""Supabase Auth identity provider."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import AuthError, Client

from mess_review.domain.models import Viewer
from mess_review.services.identity import IdentityProvider

logger = logging.getLogger(__name__)


@dataclass
class SupabaseIdentityProvider(IdentityProvider):
    """Verify access tokens against Supabase Auth."""

    client: Client

    def get_viewer(self, access_token: str) -> Viewer | None:
        """Return the user for a session token, or None if Auth rejects it."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthError as exc:
            logger.info("Rejected access token: %s", exc)
            return None
        if response is None or response.user is None:
            return None
        return Viewer(id=UUID(str(response.user.id)), email=response.user.email)
