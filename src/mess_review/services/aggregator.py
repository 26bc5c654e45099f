"""Merge food items, reviews and profiles into per-item views."""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from uuid import UUID

from mess_review.domain.models import (
    FoodItem,
    ItemView,
    MealSlot,
    Profile,
    Review,
    UserReview,
)


def build_item_views(
    food_items: Sequence[FoodItem],
    reviews: Iterable[Review],
    profiles: Iterable[Profile],
    viewer_id: UUID | None = None,
) -> list[ItemView]:
    """Return one view per food item, in the order of ``food_items``.

    Reviews that reference an unknown food item are ignored. Profiles without
    a name are skipped; when several share a user id the first one wins.
    """
    reviews_by_item: dict[UUID, list[Review]] = defaultdict(list)
    for review in reviews:
        reviews_by_item[review.food_item_id].append(review)

    names: dict[UUID, str] = {}
    for profile in profiles:
        if profile.name:
            names.setdefault(profile.user_id, profile.name)

    views = []
    for item in food_items:
        item_reviews = reviews_by_item.get(item.id, [])
        views.append(
            ItemView(
                item=item,
                added_by_name=names.get(item.added_by_user_id),
                avg_rating=_average(item_reviews),
                review_count=len(item_reviews),
                user_review=_find_user_review(item_reviews, viewer_id),
            )
        )
    return views


def filter_by_meal_slot(
    views: Iterable[ItemView], meal_slot: MealSlot | str
) -> list[ItemView]:
    """Return the views served in ``meal_slot``, preserving order."""
    slot = MealSlot(meal_slot)
    return [view for view in views if view.meal_slot == slot]


def group_by_meal_slot(views: Sequence[ItemView]) -> dict[MealSlot, list[ItemView]]:
    """Split views into every meal slot, empty slots included."""
    return {slot: filter_by_meal_slot(views, slot) for slot in MealSlot}


def _average(reviews: list[Review]) -> float | None:
    if not reviews:
        return None
    return sum(review.rating for review in reviews) / len(reviews)


def _find_user_review(
    reviews: list[Review], viewer_id: UUID | None
) -> UserReview | None:
    if viewer_id is None:
        return None
    for review in reviews:
        if review.user_id == viewer_id:
            return UserReview(rating=review.rating, comment=review.comment)
    return None
