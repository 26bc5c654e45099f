"""Mess timings for weekdays and weekends."""

from dataclasses import dataclass
from datetime import datetime, time

from mess_review.domain.models import DayType, MealSlot

SATURDAY = 5
NOON = 12


@dataclass(frozen=True)
class MealWindow:
    """Inclusive serving window for a meal slot."""

    start: time
    end: time

    def contains(self, moment: time) -> bool:
        """Return True when the wall-clock time falls inside the window."""
        return self.start <= moment <= self.end

    def display(self) -> str:
        """Format the window as ``7:30 AM - 9:45 AM``."""
        return f"{_format_time(self.start)} - {_format_time(self.end)}"


MEAL_TIMINGS: dict[DayType, dict[MealSlot, MealWindow]] = {
    DayType.WEEKDAY: {
        MealSlot.BREAKFAST: MealWindow(time(7, 30), time(9, 45)),
        MealSlot.LUNCH: MealWindow(time(12, 0), time(14, 15)),
        MealSlot.EVENING_SNACKS: MealWindow(time(16, 30), time(18, 15)),
        MealSlot.DINNER: MealWindow(time(19, 30), time(21, 45)),
    },
    DayType.WEEKEND: {
        MealSlot.BREAKFAST: MealWindow(time(7, 45), time(10, 0)),
        MealSlot.LUNCH: MealWindow(time(12, 0), time(14, 15)),
        MealSlot.EVENING_SNACKS: MealWindow(time(16, 30), time(18, 30)),
        MealSlot.DINNER: MealWindow(time(19, 30), time(21, 45)),
    },
}


@dataclass(frozen=True)
class ScheduleEntry:
    """One row of the mess schedule."""

    meal_slot: MealSlot
    label: str
    hours: str
    is_open: bool


@dataclass(frozen=True)
class MessSchedule:
    """Timings that apply to a given moment."""

    day_type: DayType
    entries: list[ScheduleEntry]

    @property
    def open_slot(self) -> MealSlot | None:
        """Slot being served right now, if any."""
        for entry in self.entries:
            if entry.is_open:
                return entry.meal_slot
        return None


def day_type_for(moment: datetime) -> DayType:
    """Return the day type; Saturday and Sunday are weekend days."""
    if moment.weekday() >= SATURDAY:
        return DayType.WEEKEND
    return DayType.WEEKDAY


def current_meal_slot(moment: datetime) -> MealSlot | None:
    """Return the meal slot being served at ``moment``, if any."""
    wall_clock = moment.time().replace(second=0, microsecond=0)
    for slot, window in MEAL_TIMINGS[day_type_for(moment)].items():
        if window.contains(wall_clock):
            return slot
    return None


def schedule_for(moment: datetime) -> MessSchedule:
    """Return the schedule for the day of ``moment`` with the open slot marked."""
    day_type = day_type_for(moment)
    open_slot = current_meal_slot(moment)
    entries = [
        ScheduleEntry(
            meal_slot=slot,
            label=slot.label,
            hours=window.display(),
            is_open=slot == open_slot,
        )
        for slot, window in MEAL_TIMINGS[day_type].items()
    ]
    return MessSchedule(day_type=day_type, entries=entries)


def _format_time(value: time) -> str:
    suffix = "AM" if value.hour < NOON else "PM"
    hour = value.hour % NOON or NOON
    return f"{hour}:{value.minute:02d} {suffix}"
