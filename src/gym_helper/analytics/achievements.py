"""Workout streaks and the weekly friends leaderboard."""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable

from ..models.user import Friend, User
from ..models.workout import Workout, WorkoutOrigin

# Workouts at most this many days apart keep a streak alive.
STREAK_GAP_DAYS = 2


@dataclass
class Achievements:
    """Headline counters for the profile screen."""

    total_workouts: int = 0
    workouts_this_month: int = 0
    current_streak: int = 0
    best_streak: int = 0

    def to_dict(self) -> dict:
        return {
            "total_workouts": self.total_workouts,
            "workouts_this_month": self.workouts_this_month,
            "current_streak": self.current_streak,
            "best_streak": self.best_streak,
        }


@dataclass
class LeaderboardEntry:
    """One row of the weekly leaderboard."""

    user_id: int
    name: str
    photo: str | None
    gym: str | None
    workouts_this_week: int
    position: int = 0

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "name": self.name,
            "photo": self.photo,
            "gym": self.gym,
            "workouts_this_week": self.workouts_this_week,
            "position": self.position,
        }


def calculate_achievements(workouts: Iterable[Workout], today: date | None = None) -> Achievements:
    """Count workouts and streaks for the given (user) workouts.

    The current streak only starts if the latest workout was today or
    yesterday, and runs while consecutive workouts are at most
    ``STREAK_GAP_DAYS`` apart.
    """
    today = today or date.today()
    workouts = list(workouts)
    dates = sorted((w.date for w in workouts), reverse=True)

    this_month = sum(
        1 for d in dates if d.month == today.month and d.year == today.year
    )

    current_streak = 0
    if dates and (today - dates[0]).days <= 1:
        current_streak = 1
        for previous, current in zip(dates, dates[1:]):
            if (previous - current).days > STREAK_GAP_DAYS:
                break
            current_streak += 1

    best_streak = 0
    if dates:
        run = 1
        best_streak = 1
        for previous, current in zip(dates, dates[1:]):
            if (previous - current).days <= STREAK_GAP_DAYS:
                run += 1
                best_streak = max(best_streak, run)
            else:
                run = 1

    return Achievements(
        total_workouts=len(workouts),
        workouts_this_month=this_month,
        current_streak=current_streak,
        best_streak=best_streak,
    )


def start_of_week(day: date) -> date:
    """Sunday on or before ``day``."""
    return day - timedelta(days=(day.weekday() + 1) % 7)


def build_leaderboard(
    current_user: User | None,
    friends: Iterable[Friend],
    workouts: Iterable[Workout],
    today: date | None = None,
) -> list[LeaderboardEntry]:
    """Rank friends and the current user by completed workouts this week."""
    today = today or date.today()
    week_start = start_of_week(today)
    workouts = list(workouts)

    def completed_this_week(candidates: list[Workout]) -> int:
        return sum(
            1 for w in candidates if w.completed and week_start <= w.date <= today
        )

    entries = [
        LeaderboardEntry(
            user_id=friend.id,
            name=friend.full_name,
            photo=friend.photo,
            gym=friend.gym,
            workouts_this_week=completed_this_week(
                [
                    w
                    for w in workouts
                    if w.origin == WorkoutOrigin.CATALOG and w.created_by == friend.id
                ]
            ),
        )
        for friend in friends
    ]

    if current_user is not None:
        own = [w for w in workouts if w.origin == WorkoutOrigin.USER]
        entries.append(
            LeaderboardEntry(
                user_id=current_user.id,
                name=current_user.full_name,
                photo=current_user.photo,
                gym=current_user.main_gym,
                workouts_this_week=completed_this_week(own),
            )
        )

    entries.sort(key=lambda e: e.workouts_this_week, reverse=True)
    for position, entry in enumerate(entries, start=1):
        entry.position = position
    return entries


def current_user_position(
    current_user: User | None,
    friends: Iterable[Friend],
    workouts: Iterable[Workout],
    today: date | None = None,
) -> LeaderboardEntry | None:
    """The current user's leaderboard row, if there is a current user."""
    if current_user is None:
        return None
    for entry in build_leaderboard(current_user, friends, workouts, today):
        if entry.user_id == current_user.id:
            return entry
    return None
