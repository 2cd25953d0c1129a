"""Tests for mission construction."""

import random

import pytest

from fitocrat.db.catalog import ExerciseCatalog
from fitocrat.errors import MissionUnbuildableError
from fitocrat.generators.mission_builder import (
    GearProbe,
    MissionBuilder,
    build_mission,
    probe_gear_catalog,
    select_exercise,
)
from fitocrat.models.exercises import BODYWEIGHT, Focus
from fitocrat.models.mission import CALISTHENICS_TEMPLATE, STANDARD_TEMPLATE, MissionMode


class RecordingLookup:
    """Wraps a catalog and records every focus it is asked for."""

    def __init__(self, catalog):
        self.catalog = catalog
        self.queries = []

    def find_candidates(self, focus, gear):
        self.queries.append(focus)
        return self.catalog.find_candidates(focus, gear)

    def list_all_gear_names(self):
        return self.catalog.list_all_gear_names()


def names(mission):
    return [e.name for e in mission.exercises]


class TestSelectExercise:
    """Tests for select_exercise."""

    def test_picks_from_candidates(self, catalog, first_choice, last_choice):
        assert select_exercise(catalog, Focus.PULL_UP, ["pull-up bar"], first_choice).name == (
            "Pull-ups"
        )
        assert select_exercise(catalog, Focus.PULL_UP, ["pull-up bar"], last_choice).name == (
            "Table Rows"
        )

    def test_respects_gear(self, catalog, first_choice):
        exercise = select_exercise(catalog, Focus.PULL_UP, [], first_choice)
        assert exercise.name == "Table Rows"

    def test_no_candidate(self, catalog, first_choice):
        assert select_exercise(catalog, Focus.ASSIST, [], first_choice) is None


class TestStandardMission:
    """Tests for standard requests."""

    def test_standard_with_neck(self, catalog, first_choice):
        mission = build_mission(catalog, gear=["sandbag"], rng=first_choice)

        assert mission.requested_mode == MissionMode.STANDARD
        assert mission.resolved_mode == MissionMode.STANDARD
        assert not mission.fell_back
        assert names(mission) == [
            "Table Rows",
            "Push-ups",
            "Air Squats",
            "Crunches",
            "Sandbag Carries",
            "Crunches",
            "Neck Bridges",
            "Crunches",
        ]

    def test_standard_with_grip(self, catalog, last_choice):
        mission = build_mission(catalog, gear=["sandbag"], rng=last_choice)

        assert mission.resolved_mode == MissionMode.STANDARD
        assert mission.exercises[6].name == "Sandbag Pinch Holds"
        assert mission.exercises[6].focus == Focus.GRIP

    def test_bodyweight_falls_back_without_assist(self, catalog, first_choice):
        """No bodyweight assist exercise means the standard template cannot be met."""
        mission = build_mission(catalog, rng=first_choice)

        assert mission.requested_mode == MissionMode.STANDARD
        assert mission.resolved_mode == MissionMode.CALISTHENICS
        assert mission.fell_back
        assert names(mission) == [
            "Table Rows",
            "Push-ups",
            "Crunches",
            "Air Squats",
            "Air Squats",
            "Crunches",
        ]

    def test_unlucky_coin_falls_back(self, catalog, first_choice, last_choice):
        """Kettlebell covers neck (bodyweight) but not grip."""
        assert build_mission(catalog, ["kettlebell"], rng=first_choice).resolved_mode == (
            MissionMode.STANDARD
        )
        fallback = build_mission(catalog, ["kettlebell"], rng=last_choice)
        assert fallback.resolved_mode == MissionMode.CALISTHENICS
        assert fallback.exercises[3].name == "Kettlebell Swings"

    def test_fallback_does_not_leak_partial_attempt(self, catalog, first_choice):
        mission = build_mission(catalog, rng=first_choice)
        assert len(mission.exercises) == len(CALISTHENICS_TEMPLATE.foci)
        assert all(e.focus != Focus.ASSIST for e in mission.exercises)

    def test_unbuildable(self, first_choice, sample_exercises):
        catalog = ExerciseCatalog(e for e in sample_exercises if e.focus != Focus.PUSH_UP)

        with pytest.raises(MissionUnbuildableError) as exc_info:
            build_mission(catalog, gear=["sandbag"], rng=first_choice)

        assert exc_info.value.requested_mode == MissionMode.STANDARD
        assert exc_info.value.gear == frozenset({BODYWEIGHT, "sandbag"})

    def test_one_attempt_per_template(self, catalog, first_choice):
        """A failed standard attempt is not retried before the fallback."""
        lookup = RecordingLookup(catalog)
        build_mission(lookup, rng=first_choice)

        # pull-up, push-up, wheel-house, abs, assist (fails), then six calisthenics slots
        assert lookup.queries.count(Focus.ASSIST) == 1
        assert len(lookup.queries) == 5 + len(CALISTHENICS_TEMPLATE.foci)


class TestCalisthenicsMission:
    """Tests for calisthenics requests."""

    def test_calisthenics(self, catalog, first_choice):
        mission = build_mission(catalog, gear=["sandbag"], calisthenics=True, rng=first_choice)

        assert mission.requested_mode == MissionMode.CALISTHENICS
        assert mission.resolved_mode == MissionMode.CALISTHENICS
        assert not mission.fell_back
        assert len(mission.exercises) == 6

    def test_no_wheel_house_is_unbuildable(self, sample_exercises, first_choice):
        catalog = ExerciseCatalog(
            e for e in sample_exercises if not (e.focus == Focus.WHEEL_HOUSE and not e.gear)
        )
        lookup = RecordingLookup(catalog)

        with pytest.raises(MissionUnbuildableError) as exc_info:
            build_mission(lookup, calisthenics=True, rng=first_choice)

        assert exc_info.value.requested_mode == MissionMode.CALISTHENICS
        # Never tried the standard template
        assert Focus.ASSIST not in lookup.queries

    def test_calisthenics_never_resolves_to_standard(self, catalog):
        for seed in range(25):
            mission = build_mission(
                catalog, ["sandbag", "pull-up bar"], calisthenics=True, rng=random.Random(seed)
            )
            assert mission.resolved_mode == MissionMode.CALISTHENICS


class TestMissionProperties:
    """Properties that hold for every built mission."""

    @pytest.mark.parametrize("gear", [[], ["sandbag"], ["kettlebell"], ["pull-up bar", "dip bars"]])
    def test_exercise_count_and_gear(self, catalog, gear):
        allowed = {BODYWEIGHT, *gear}
        for seed in range(25):
            mission = build_mission(catalog, gear, rng=random.Random(seed))

            template = STANDARD_TEMPLATE if mission.resolved_mode == MissionMode.STANDARD else (
                CALISTHENICS_TEMPLATE
            )
            assert len(mission.exercises) == len(template.foci)
            for exercise in mission.exercises:
                assert exercise.required_gear <= allowed

    def test_seeded_builds_repeat(self, catalog):
        first = build_mission(catalog, ["sandbag"], rng=random.Random(42))
        second = build_mission(catalog, ["sandbag"], rng=random.Random(42))
        assert names(first) == names(second)

    def test_builder_defaults_to_system_random(self, catalog):
        builder = MissionBuilder(catalog)
        assert isinstance(builder.rng, random.Random)
        assert builder.build(["sandbag"]).gear == frozenset({BODYWEIGHT, "sandbag"})


class TestGearProbe:
    """Tests for probe_gear_catalog."""

    def test_gear_report_with_neck(self, catalog, first_choice):
        probes = probe_gear_catalog(catalog, rng=first_choice)

        assert probes == [
            GearProbe("dip bars", False),
            GearProbe("kettlebell", True),
            GearProbe("pull-up bar", False),
            GearProbe("sandbag", True),
        ]

    def test_gear_report_with_grip(self, catalog, last_choice):
        probes = {p.name: p.can_complete_standard for p in probe_gear_catalog(catalog, last_choice)}

        assert probes == {
            "dip bars": False,
            "kettlebell": False,
            "pull-up bar": False,
            "sandbag": True,
        }

    def test_gear_report_str(self):
        assert str(GearProbe("sandbag", True)) == "sandbag (can complete standard mission)"
        assert str(GearProbe("dip bars", False)) == "dip bars"

    def test_gear_report_skips_bodyweight_sentinel(self, sample_exercises, first_choice):
        catalog = ExerciseCatalog(sample_exercises, gear_names=["none", "sandbag"])
        assert [p.name for p in probe_gear_catalog(catalog, first_choice)] == ["sandbag"]
