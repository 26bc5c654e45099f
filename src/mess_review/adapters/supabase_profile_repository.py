"""Supabase repository for user profiles."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from mess_review.domain.models import Profile
from mess_review.services.menu import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profiles."""

    client: Client

    def list_profiles(self) -> list[Profile]:
        """Return the display name of every user."""
        response = self.client.table("profiles").select("user_id, name").execute()
        return [
            Profile(user_id=UUID(row["user_id"]), name=row.get("name") or None)
            for row in response.data or []
        ]
