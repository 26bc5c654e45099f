"""FastAPI application factory."""

import logging
from uuid import UUID

from fastapi import Depends, FastAPI, Header, HTTPException, Request, Response, status

from mess_review.api.models import (
    FoodItemCreate,
    FoodItemOut,
    ItemViewOut,
    MealSlotGroupOut,
    MenuBySlotOut,
    ReviewOut,
    ReviewUpsert,
    ScheduleEntryOut,
    ScheduleOut,
    TodayMenuOut,
    UserReviewOut,
)
from mess_review.app_logging import configure_logging
from mess_review.containers import AppContainer
from mess_review.domain.models import FoodItem, ItemView, MealSlot, Viewer
from mess_review.domain.schedule import MessSchedule
from mess_review.services.aggregator import filter_by_meal_slot, group_by_meal_slot
from mess_review.services.menu import FoodItemNotFoundError, TodayMenu

logger = logging.getLogger(__name__)


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the running app."""
    return request.app.state.container


def get_viewer(
    authorization: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> Viewer | None:
    """Resolve the optional viewer from the Authorization header."""
    try:
        return container.identity_service.resolve_viewer(authorization)
    except Exception as exc:
        logger.exception("Error verifying access token")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to verify sign-in.",
        ) from exc


def require_viewer(viewer: Viewer | None = Depends(get_viewer)) -> Viewer:
    """Reject requests that are not signed in."""
    if viewer is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="You must be logged in.",
        )
    return viewer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    app = FastAPI(title="Mess Review")
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/schedule")
    def schedule(
        state_container: AppContainer = Depends(get_container),
    ) -> ScheduleOut:
        """Return today's mess timings with the open slot marked."""
        return _serialize_schedule(state_container.menu_service.get_schedule())

    @app.get("/menu/today")
    def today_menu(
        meal_slot: MealSlot | None = None,
        viewer: Viewer | None = Depends(get_viewer),
        state_container: AppContainer = Depends(get_container),
    ) -> TodayMenuOut:
        """Return today's food items with ratings, optionally for one slot."""
        menu = _load_menu(state_container, viewer)
        items = menu.items
        if meal_slot is not None:
            items = filter_by_meal_slot(items, meal_slot)
        return TodayMenuOut(
            served_on=menu.served_on,
            meal_slot=meal_slot,
            items=[_serialize_view(view) for view in items],
        )

    @app.get("/menu/today/by-slot")
    def today_menu_by_slot(
        viewer: Viewer | None = Depends(get_viewer),
        state_container: AppContainer = Depends(get_container),
    ) -> MenuBySlotOut:
        """Return today's food items grouped into every meal slot."""
        menu = _load_menu(state_container, viewer)
        groups = group_by_meal_slot(menu.items)
        return MenuBySlotOut(
            served_on=menu.served_on,
            slots=[
                MealSlotGroupOut(
                    meal_slot=slot,
                    label=slot.label,
                    items=[_serialize_view(view) for view in views],
                )
                for slot, views in groups.items()
            ],
        )

    @app.post("/food-items", status_code=status.HTTP_201_CREATED)
    def add_food_item(
        payload: FoodItemCreate,
        viewer: Viewer = Depends(require_viewer),
        state_container: AppContainer = Depends(get_container),
    ) -> FoodItemOut:
        """Add a food item to today's menu."""
        try:
            created = state_container.menu_service.add_food_item(
                user_id=viewer.id,
                name=payload.name,
                description=payload.description,
                meal_slot=payload.meal_slot,
            )
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        except Exception as exc:
            logger.exception("Failed to add food item")
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Failed to add food item.",
            ) from exc
        return _serialize_food_item(created)

    @app.put("/food-items/{food_item_id}/review")
    def upsert_review(
        food_item_id: UUID,
        payload: ReviewUpsert,
        response: Response,
        viewer: Viewer = Depends(require_viewer),
        state_container: AppContainer = Depends(get_container),
    ) -> ReviewOut:
        """Create or update the viewer's review of a food item."""
        try:
            submission = state_container.menu_service.submit_review(
                user_id=viewer.id,
                food_item_id=food_item_id,
                rating=payload.rating,
                comment=payload.comment,
            )
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        except FoodItemNotFoundError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Food item not found.",
            ) from exc
        except Exception as exc:
            logger.exception("Failed to save review for %s", food_item_id)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Failed to save review.",
            ) from exc
        if not submission.updated:
            response.status_code = status.HTTP_201_CREATED
        review = submission.review
        return ReviewOut(
            food_item_id=review.food_item_id,
            user_id=review.user_id,
            rating=review.rating,
            comment=review.comment,
            updated=submission.updated,
            message=submission.message,
        )

    return app


def _load_menu(container: AppContainer, viewer: Viewer | None) -> TodayMenu:
    """Run a fetch cycle, mapping backend failures to a gateway error."""
    try:
        return container.menu_service.get_today_menu(
            viewer_id=viewer.id if viewer else None
        )
    except Exception as exc:
        logger.exception("Error fetching food items")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to load food items.",
        ) from exc


def _serialize_food_item(item: FoodItem) -> FoodItemOut:
    return FoodItemOut(
        id=item.id,
        name=item.name,
        description=item.description,
        meal_slot=item.meal_slot,
        meal_slot_label=item.meal_slot.label,
        date_served=item.date_served,
        added_by_user_id=item.added_by_user_id,
        day_type=item.day_type,
    )


def _serialize_view(view: ItemView) -> ItemViewOut:
    item = view.item
    user_review = (
        UserReviewOut(rating=view.user_review.rating, comment=view.user_review.comment)
        if view.user_review
        else None
    )
    return ItemViewOut(
        id=item.id,
        name=item.name,
        description=item.description,
        meal_slot=item.meal_slot,
        meal_slot_label=item.meal_slot.label,
        date_served=item.date_served,
        added_by_user_id=item.added_by_user_id,
        day_type=item.day_type,
        added_by_name=view.added_by_name,
        avg_rating=view.avg_rating,
        review_count=view.review_count,
        user_review=user_review,
    )


def _serialize_schedule(schedule: MessSchedule) -> ScheduleOut:
    return ScheduleOut(
        day_type=schedule.day_type,
        open_slot=schedule.open_slot,
        entries=[
            ScheduleEntryOut(
                meal_slot=entry.meal_slot,
                label=entry.label,
                hours=entry.hours,
                is_open=entry.is_open,
            )
            for entry in schedule.entries
        ],
    )
