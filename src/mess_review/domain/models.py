"""Domain models for the mess review menu."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from uuid import UUID


class MealSlot(str, Enum):
    """Serving period of a food item, in display order."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    EVENING_SNACKS = "evening_snacks"
    DINNER = "dinner"

    @property
    def label(self) -> str:
        """Human readable name, e.g. ``Evening Snacks``."""
        return self.value.replace("_", " ").title()


class DayType(str, Enum):
    """Whether a date follows the weekday or weekend timings."""

    WEEKDAY = "weekday"
    WEEKEND = "weekend"


@dataclass(frozen=True)
class FoodItem:
    """Food item served on a given date."""

    id: UUID
    name: str
    description: str | None
    meal_slot: MealSlot
    date_served: date
    added_by_user_id: UUID
    day_type: DayType | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class Review:
    """A user's star rating for a food item."""

    food_item_id: UUID
    user_id: UUID
    rating: int
    comment: str | None = None
    id: UUID | None = None


@dataclass(frozen=True)
class Profile:
    """Display name of a user."""

    user_id: UUID
    name: str | None


@dataclass(frozen=True)
class UserReview:
    """The viewer's own review of an item."""

    rating: int
    comment: str | None


@dataclass(frozen=True)
class ItemView:
    """Food item enriched with review statistics for one viewer."""

    item: FoodItem
    added_by_name: str | None
    avg_rating: float | None
    review_count: int
    user_review: UserReview | None

    @property
    def id(self) -> UUID:
        """Identifier of the underlying food item."""
        return self.item.id

    @property
    def meal_slot(self) -> MealSlot:
        """Meal slot the item is served in."""
        return self.item.meal_slot


@dataclass(frozen=True)
class Viewer:
    """Authenticated user on whose behalf the menu is personalized."""

    id: UUID
    email: str | None = None
