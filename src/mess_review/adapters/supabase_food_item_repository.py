"""Supabase repository for food items."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from mess_review.domain.models import DayType, FoodItem, MealSlot
from mess_review.services.menu import FoodItemRepository


@dataclass
class SupabaseFoodItemRepository(FoodItemRepository):
    """Supabase implementation for food items."""

    client: Client

    def list_served_on(self, served_on: date) -> list[FoodItem]:
        """Return items served on a date, newest first."""
        response = (
            self.client.table("food_items")
            .select("*")
            .eq("date_served", served_on.isoformat())
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_food_item(row) for row in response.data or []]

    def get_food_item(self, food_item_id: UUID) -> FoodItem | None:
        """Return a food item by id, if present."""
        response = (
            self.client.table("food_items")
            .select("*")
            .eq("id", str(food_item_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food_item(response.data[0])

    def create_food_item(self, payload: dict[str, object]) -> FoodItem:
        """Insert a food item row and return it."""
        response = self.client.table("food_items").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create food item")
        return _parse_food_item(response.data[0])


def _parse_food_item(row: dict[str, object]) -> FoodItem:
    day_type = row.get("day_type")
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None
    )
    return FoodItem(
        id=UUID(row["id"]),
        name=str(row.get("name", "")),
        description=row.get("description"),
        meal_slot=MealSlot(row["meal_slot"]),
        date_served=date.fromisoformat(row["date_served"]),
        added_by_user_id=UUID(row["added_by_user_id"]),
        day_type=DayType(day_type) if day_type else None,
        created_at=created_at,
    )
