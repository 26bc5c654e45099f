"""Services for today's menu and the reviews attached to it."""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from mess_review.domain.models import FoodItem, ItemView, MealSlot, Profile, Review
from mess_review.domain.schedule import MessSchedule, day_type_for, schedule_for
from mess_review.services.aggregator import build_item_views

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


class FoodItemNotFoundError(LookupError):
    """Raised when a review targets a food item that does not exist."""


class FoodItemRepository(Protocol):
    """Persistence interface for food items."""

    def list_served_on(self, served_on: date) -> list[FoodItem]:
        """Return items served on a date, newest first."""

    def get_food_item(self, food_item_id: UUID) -> FoodItem | None:
        """Return a food item by id, if present."""

    def create_food_item(self, payload: dict[str, object]) -> FoodItem:
        """Create a food item and return it."""


class ReviewRepository(Protocol):
    """Persistence interface for reviews."""

    def list_reviews(self) -> list[Review]:
        """Return all reviews."""

    def get_review(self, food_item_id: UUID, user_id: UUID) -> Review | None:
        """Return a user's review of an item, if present."""

    def upsert_review(self, review: Review) -> Review:
        """Insert or replace the review for its (food item, user) pair."""


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def list_profiles(self) -> list[Profile]:
        """Return all profiles."""


@dataclass(frozen=True)
class TodayMenu:
    """Item views for the food served today."""

    served_on: date
    items: list[ItemView]


@dataclass(frozen=True)
class ReviewSubmission:
    """Outcome of submitting a review."""

    review: Review
    updated: bool

    @property
    def message(self) -> str:
        """Confirmation shown to the reviewer."""
        if self.updated:
            return "Your review has been updated!"
        return "Your review has been submitted!"


@dataclass
class MenuService:
    """Application service for the daily menu."""

    food_items: FoodItemRepository
    reviews: ReviewRepository
    profiles: ProfileRepository
    timezone_name: str = "Asia/Kolkata"

    def now(self) -> datetime:
        """Return the current time in the institution's timezone."""
        return datetime.now(tz=ZoneInfo(self.timezone_name))

    def local_time(self, now: datetime | None = None) -> datetime:
        """Express ``now`` in the institution's timezone.

        Naive datetimes are taken to be institution wall-clock time already.
        """
        if now is None:
            return self.now()
        tz = ZoneInfo(self.timezone_name)
        if now.tzinfo is None:
            return now.replace(tzinfo=tz)
        return now.astimezone(tz)

    def get_today_menu(
        self, viewer_id: UUID | None = None, now: datetime | None = None
    ) -> TodayMenu:
        """Fetch today's items, reviews and profiles and merge them."""
        served_on = self.local_time(now).date()
        items = self.food_items.list_served_on(served_on)
        reviews = self.reviews.list_reviews()
        profiles = self.profiles.list_profiles()
        return TodayMenu(
            served_on=served_on,
            items=build_item_views(items, reviews, profiles, viewer_id),
        )

    def get_schedule(self, now: datetime | None = None) -> MessSchedule:
        """Return the mess timings with the open slot marked."""
        return schedule_for(self.local_time(now))

    def add_food_item(
        self,
        user_id: UUID,
        name: str,
        description: str | None,
        meal_slot: MealSlot | str | None,
        now: datetime | None = None,
    ) -> FoodItem:
        """Validate and store a food item served today."""
        cleaned_name = name.strip()
        if not cleaned_name or not meal_slot:
            raise ValueError("Please fill in all required fields.")
        try:
            slot = MealSlot(meal_slot)
        except ValueError as exc:
            raise ValueError(f"Unknown meal slot: {meal_slot}") from exc

        moment = self.local_time(now)
        created = self.food_items.create_food_item(
            {
                "name": cleaned_name,
                "description": _clean_optional(description),
                "meal_slot": slot.value,
                "day_type": day_type_for(moment).value,
                "added_by_user_id": str(user_id),
                "date_served": moment.date().isoformat(),
            }
        )
        logger.info("Food item %s added by %s for %s", created.id, user_id, slot.value)
        return created

    def submit_review(
        self,
        user_id: UUID,
        food_item_id: UUID,
        rating: int,
        comment: str | None,
    ) -> ReviewSubmission:
        """Create or replace the user's review of a food item."""
        if not MIN_RATING <= rating <= MAX_RATING:
            raise ValueError("Please select a rating.")
        if self.food_items.get_food_item(food_item_id) is None:
            raise FoodItemNotFoundError(str(food_item_id))

        existing = self.reviews.get_review(food_item_id, user_id)
        saved = self.reviews.upsert_review(
            Review(
                food_item_id=food_item_id,
                user_id=user_id,
                rating=rating,
                comment=_clean_optional(comment),
            )
        )
        logger.info(
            "Review for %s by %s %s",
            food_item_id,
            user_id,
            "updated" if existing else "submitted",
        )
        return ReviewSubmission(review=saved, updated=existing is not None)


def _clean_optional(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None
