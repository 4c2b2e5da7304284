"""Tests for streaks and the weekly leaderboard."""

from datetime import date

from gym_helper.analytics import build_leaderboard, calculate_achievements, current_user_position
from gym_helper.analytics.achievements import start_of_week
from gym_helper.models.user import Friend, User
from gym_helper.models.workout import WorkoutOrigin

TODAY = date(2024, 6, 12)  # a Wednesday


def _on(make_workout, *days, **kwargs):
    return [make_workout("e", [], day, **kwargs) for day in days]


class TestAchievements:
    """Tests for calculate_achievements."""

    def test_no_workouts(self):
        result = calculate_achievements([], today=TODAY)
        assert result.to_dict() == {
            "total_workouts": 0,
            "workouts_this_month": 0,
            "current_streak": 0,
            "best_streak": 0,
        }

    def test_counts_this_month(self, make_workout):
        workouts = _on(make_workout, date(2024, 6, 1), date(2024, 6, 10), date(2024, 5, 30), date(2023, 6, 5))
        result = calculate_achievements(workouts, today=TODAY)

        assert result.total_workouts == 4
        assert result.workouts_this_month == 2

    def test_current_streak_allows_one_rest_day(self, make_workout):
        workouts = _on(make_workout, date(2024, 6, 11), date(2024, 6, 9), date(2024, 6, 7), date(2024, 6, 1))
        result = calculate_achievements(workouts, today=TODAY)

        assert result.current_streak == 3
        assert result.best_streak == 3

    def test_streak_broken_when_latest_is_old(self, make_workout):
        workouts = _on(make_workout, date(2024, 6, 9), date(2024, 6, 8))
        result = calculate_achievements(workouts, today=TODAY)

        assert result.current_streak == 0
        assert result.best_streak == 2

    def test_best_streak_from_the_past(self, make_workout):
        workouts = _on(
            make_workout,
            date(2024, 6, 12),
            date(2024, 5, 1),
            date(2024, 5, 2),
            date(2024, 5, 3),
            date(2024, 5, 5),
        )
        result = calculate_achievements(workouts, today=TODAY)

        assert result.current_streak == 1
        assert result.best_streak == 4


class TestLeaderboard:
    """Tests for build_leaderboard."""

    def test_week_starts_on_sunday(self):
        assert start_of_week(TODAY) == date(2024, 6, 9)
        assert start_of_week(date(2024, 6, 9)) == date(2024, 6, 9)
        assert start_of_week(date(2024, 6, 15)) == date(2024, 6, 9)

    def test_ranking(self, make_workout):
        user = User(id=1, first_name="Иван", last_name="Петров", main_gym="FitnessPro")
        friends = [
            Friend(id=101, first_name="Мария", last_name="Иванова"),
            Friend(id=102, first_name="Дмитрий", last_name="Сидоров"),
        ]
        workouts = (
            _on(make_workout, date(2024, 6, 10), date(2024, 6, 11), completed=True, created_by=102, origin=WorkoutOrigin.CATALOG)
            + _on(make_workout, date(2024, 6, 10), completed=True, created_by=1, origin=WorkoutOrigin.USER)
            # last week and not completed do not count
            + _on(make_workout, date(2024, 6, 8), completed=True, created_by=101, origin=WorkoutOrigin.CATALOG)
            + _on(make_workout, date(2024, 6, 11), completed=False, created_by=101, origin=WorkoutOrigin.CATALOG)
        )
        entries = build_leaderboard(user, friends, workouts, today=TODAY)

        assert [(e.user_id, e.workouts_this_week, e.position) for e in entries] == [
            (102, 2, 1),
            (1, 1, 2),
            (101, 0, 3),
        ]
        assert entries[1].gym == "FitnessPro"

    def test_friends_count_only_catalog_workouts(self, friend, make_workout):
        workouts = _on(
            make_workout, date(2024, 6, 10), completed=True, created_by=101, origin=WorkoutOrigin.USER
        )
        entries = build_leaderboard(None, [friend], workouts, today=TODAY)
        assert entries[0].workouts_this_week == 0

    def test_without_current_user(self, friend):
        entries = build_leaderboard(None, [friend], [], today=TODAY)
        assert [e.user_id for e in entries] == [101]
        assert current_user_position(None, [friend], [], today=TODAY) is None

    def test_current_user_position(self, friend, make_workout):
        user = User(id=1, first_name="Иван", last_name="Петров")
        workouts = _on(make_workout, date(2024, 6, 12), completed=True, origin=WorkoutOrigin.USER)
        entry = current_user_position(user, [friend], workouts, today=TODAY)

        assert entry.position == 1
        assert entry.workouts_this_week == 1
