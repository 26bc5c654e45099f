"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from mess_review.adapters.supabase_food_item_repository import (
    SupabaseFoodItemRepository,
)
from mess_review.adapters.supabase_identity_provider import SupabaseIdentityProvider
from mess_review.adapters.supabase_profile_repository import SupabaseProfileRepository
from mess_review.adapters.supabase_review_repository import SupabaseReviewRepository
from mess_review.config import Settings
from mess_review.services.identity import IdentityService
from mess_review.services.menu import MenuService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    menu_service: MenuService
    identity_service: IdentityService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    menu_service = MenuService(
        food_items=SupabaseFoodItemRepository(supabase_client),
        reviews=SupabaseReviewRepository(supabase_client),
        profiles=SupabaseProfileRepository(supabase_client),
        timezone_name=resolved_settings.institution_timezone,
    )
    identity_service = IdentityService(SupabaseIdentityProvider(supabase_client))
    return AppContainer(
        settings=resolved_settings,
        menu_service=menu_service,
        identity_service=identity_service,
    )
