"""Pydantic models for the HTTP API."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field

from mess_review.domain.models import DayType, MealSlot


class FoodItemCreate(BaseModel):
    """Payload for adding a food item to today's menu."""

    name: str = ""
    description: str | None = None
    meal_slot: str | None = None


class ReviewUpsert(BaseModel):
    """Payload for creating or editing the viewer's review."""

    rating: int = 0
    comment: str | None = None


class UserReviewOut(BaseModel):
    """The viewer's own review."""

    rating: int
    comment: str | None = None


class FoodItemOut(BaseModel):
    """A food item as stored."""

    id: UUID
    name: str
    description: str | None = None
    meal_slot: MealSlot
    meal_slot_label: str
    date_served: date
    added_by_user_id: UUID
    day_type: DayType | None = None


class ItemViewOut(FoodItemOut):
    """A food item with its review statistics."""

    added_by_name: str | None = None
    avg_rating: float | None = None
    review_count: int = 0
    user_review: UserReviewOut | None = None


class TodayMenuOut(BaseModel):
    """Today's menu, optionally restricted to one meal slot."""

    served_on: date
    meal_slot: MealSlot | None = None
    items: list[ItemViewOut]


class MealSlotGroupOut(BaseModel):
    """Items served in one meal slot."""

    meal_slot: MealSlot
    label: str
    items: list[ItemViewOut]


class MenuBySlotOut(BaseModel):
    """Today's menu split into every meal slot."""

    served_on: date
    slots: list[MealSlotGroupOut]


class ReviewOut(BaseModel):
    """A stored review with a confirmation message."""

    food_item_id: UUID
    user_id: UUID
    rating: int
    comment: str | None = None
    updated: bool
    message: str


class ScheduleEntryOut(BaseModel):
    """One meal slot's timings."""

    meal_slot: MealSlot
    label: str
    hours: str
    is_open: bool


class ScheduleOut(BaseModel):
    """Mess timings for the current day."""

    day_type: DayType
    open_slot: MealSlot | None = None
    entries: list[ScheduleEntryOut] = Field(default_factory=list)
