"""Supabase repository for reviews."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from mess_review.domain.models import Review
from mess_review.services.menu import ReviewRepository


@dataclass
class SupabaseReviewRepository(ReviewRepository):
    """Supabase implementation for reviews."""

    client: Client

    def list_reviews(self) -> list[Review]:
        """Return all reviews."""
        response = (
            self.client.table("reviews")
            .select("id, food_item_id, user_id, rating, comment")
            .execute()
        )
        return [_parse_review(row) for row in response.data or []]

    def get_review(self, food_item_id: UUID, user_id: UUID) -> Review | None:
        """Return a user's review of an item, if present."""
        response = (
            self.client.table("reviews")
            .select("id, food_item_id, user_id, rating, comment")
            .eq("food_item_id", str(food_item_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_review(response.data[0])

    def upsert_review(self, review: Review) -> Review:
        """Insert or replace the review keyed by (food_item_id, user_id)."""
        response = (
            self.client.table("reviews")
            .upsert(
                {
                    "food_item_id": str(review.food_item_id),
                    "user_id": str(review.user_id),
                    "rating": review.rating,
                    "comment": review.comment,
                },
                on_conflict="food_item_id,user_id",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save review")
        return _parse_review(response.data[0])


def _parse_review(row: dict[str, object]) -> Review:
    return Review(
        id=UUID(row["id"]) if row.get("id") else None,
        food_item_id=UUID(row["food_item_id"]),
        user_id=UUID(row["user_id"]),
        rating=int(row["rating"]),
        comment=row.get("comment"),
    )
