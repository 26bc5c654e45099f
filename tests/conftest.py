"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID, uuid4

import pytest

from mess_review.config import Settings
from mess_review.containers import AppContainer
from mess_review.domain.models import FoodItem, MealSlot, Profile, Review, Viewer
from mess_review.services.identity import IdentityProvider, IdentityService
from mess_review.services.menu import (
    FoodItemRepository,
    MenuService,
    ProfileRepository,
    ReviewRepository,
)

VIEWER_TOKEN = "viewer-token"


def make_food_item(  # noqa: PLR0913
    name: str = "Rajma Rice",
    meal_slot: MealSlot = MealSlot.LUNCH,
    served_on: date | None = None,
    added_by: UUID | None = None,
    description: str | None = None,
    food_item_id: UUID | None = None,
) -> FoodItem:
    return FoodItem(
        id=food_item_id or uuid4(),
        name=name,
        description=description,
        meal_slot=meal_slot,
        date_served=served_on or date(2024, 3, 4),
        added_by_user_id=added_by or uuid4(),
    )


@dataclass
class InMemoryFoodItemRepository(FoodItemRepository):
    """In-memory food item repository for tests."""

    items: list[FoodItem] = field(default_factory=list)
    created: list[dict[str, object]] = field(default_factory=list)

    def list_served_on(self, served_on: date) -> list[FoodItem]:
        return [item for item in self.items if item.date_served == served_on]

    def get_food_item(self, food_item_id: UUID) -> FoodItem | None:
        for item in self.items:
            if item.id == food_item_id:
                return item
        return None

    def create_food_item(self, payload: dict[str, object]) -> FoodItem:
        self.created.append(payload)
        item = FoodItem(
            id=uuid4(),
            name=str(payload["name"]),
            description=payload.get("description"),
            meal_slot=MealSlot(payload["meal_slot"]),
            date_served=date.fromisoformat(str(payload["date_served"])),
            added_by_user_id=UUID(str(payload["added_by_user_id"])),
            created_at=datetime(2024, 3, 4, 12, 0),
        )
        self.items.insert(0, item)
        return item


@dataclass
class InMemoryReviewRepository(ReviewRepository):
    """In-memory review repository keyed by (food item, user)."""

    reviews: dict[tuple[UUID, UUID], Review] = field(default_factory=dict)

    def add(self, review: Review) -> None:
        self.reviews[(review.food_item_id, review.user_id)] = review

    def list_reviews(self) -> list[Review]:
        return list(self.reviews.values())

    def get_review(self, food_item_id: UUID, user_id: UUID) -> Review | None:
        return self.reviews.get((food_item_id, user_id))

    def upsert_review(self, review: Review) -> Review:
        self.add(review)
        return review


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: list[Profile] = field(default_factory=list)

    def list_profiles(self) -> list[Profile]:
        return list(self.profiles)


@dataclass
class FailingReviewRepository(InMemoryReviewRepository):
    """Review repository whose reads fail like an unreachable backend."""

    def list_reviews(self) -> list[Review]:
        raise RuntimeError("backend unavailable")


@dataclass
class FakeIdentityProvider(IdentityProvider):
    """Identity provider with a fixed token table."""

    viewers: dict[str, Viewer] = field(default_factory=dict)

    def get_viewer(self, access_token: str) -> Viewer | None:
        return self.viewers.get(access_token)


@dataclass
class UnreachableIdentityProvider(IdentityProvider):
    """Identity provider whose auth backend cannot be reached."""

    def get_viewer(self, access_token: str) -> Viewer | None:
        raise ConnectionError("auth backend unavailable")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="test.service.key",
        institution_timezone="Asia/Kolkata",
    )


@pytest.fixture
def viewer() -> Viewer:
    return Viewer(id=uuid4(), email="student@iitb.ac.in")


@pytest.fixture
def food_item_repository() -> InMemoryFoodItemRepository:
    return InMemoryFoodItemRepository()


@pytest.fixture
def review_repository() -> InMemoryReviewRepository:
    return InMemoryReviewRepository()


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def menu_service(
    settings: Settings,
    food_item_repository: InMemoryFoodItemRepository,
    review_repository: InMemoryReviewRepository,
    profile_repository: InMemoryProfileRepository,
) -> MenuService:
    return MenuService(
        food_items=food_item_repository,
        reviews=review_repository,
        profiles=profile_repository,
        timezone_name=settings.institution_timezone,
    )


@pytest.fixture
def container(
    settings: Settings, menu_service: MenuService, viewer: Viewer
) -> AppContainer:
    identity_service = IdentityService(FakeIdentityProvider({VIEWER_TOKEN: viewer}))
    return AppContainer(
        settings=settings,
        menu_service=menu_service,
        identity_service=identity_service,
    )
