"""
Tests for the scale preview controller.

Timers are driven by FakeScheduler, so debounce behaviour is checked
without a Tk main loop.
"""

import pytest

from src.models.plan import IngredientLine, Part, PlanRecipe
from src.services.exceptions import ValidationError
from src.services.planning.scale_preview import (
    ScalePreviewController,
    is_valid_percent,
    validate_overall_percent,
    validate_part_percents,
)


def make_recipe(output=50, goal=100, part_percents=(100, 80)):
    parts = [
        Part(
            part_name=f"part {i}",
            percent=percent,
            ingredients=[IngredientLine(i + 1, "Flour", "g", 100, 100)],
        )
        for i, percent in enumerate(part_percents)
    ]
    return PlanRecipe(
        recipe_id=1,
        name="Scone",
        output_quantity=output,
        goal_quantity=goal,
        parts=parts,
    )


@pytest.fixture
def previews():
    return []


@pytest.fixture
def controller(scheduler, previews):
    ctrl = ScalePreviewController(scheduler, on_preview=previews.append, delay_ms=500)
    ctrl.open(make_recipe())
    return ctrl


class TestValidation:
    """Tests for percent validation helpers."""

    def test_is_valid_percent(self):
        assert is_valid_percent(1)
        assert is_valid_percent(0.5)
        assert not is_valid_percent(0)
        assert not is_valid_percent(-10)
        assert not is_valid_percent(None)

    def test_validate_overall_percent_accepts_numeric_text(self):
        assert validate_overall_percent(" 150 ") == 150

    def test_validate_overall_percent_sends_whole_numbers_as_int(self):
        assert type(validate_overall_percent("200")) is int
        assert validate_overall_percent("12.5") == 12.5

    @pytest.mark.parametrize("raw", ["", "abc", "0", "-5", None])
    def test_validate_overall_percent_rejects(self, raw):
        with pytest.raises(ValidationError):
            validate_overall_percent(raw)

    def test_validate_part_percents_requires_one_per_part(self):
        with pytest.raises(ValidationError):
            validate_part_percents([100], part_count=2)

    def test_validate_part_percents_rejects_blank_entry(self):
        with pytest.raises(ValidationError):
            validate_part_percents([100, None], part_count=2)

    def test_validate_part_percents_returns_copy(self):
        values = [100, 80]
        result = validate_part_percents(values, part_count=2)
        assert result == [100, 80]
        assert result is not values

    def test_validate_part_percents_sends_whole_numbers_as_int(self):
        result = validate_part_percents([100.0, 82.5], part_count=2)
        assert result == [100, 82.5]
        assert type(result[0]) is int


class TestOpen:
    """Tests for initializing from a recipe."""

    def test_open_derives_percent_and_preview(self, controller, previews):
        assert controller.overall_percent == 200
        assert controller.preview == 100
        assert previews == [100]

    def test_open_stages_part_percents(self, controller):
        assert controller.part_percents == [100, 80]

    def test_open_with_zero_output_uses_100(self, scheduler):
        ctrl = ScalePreviewController(scheduler)
        ctrl.open(make_recipe(output=0, goal=30))
        assert ctrl.overall_percent == 100
        assert ctrl.preview == 30

    def test_open_rounds_fractional_goal(self, scheduler):
        ctrl = ScalePreviewController(scheduler)
        ctrl.open(make_recipe(output=10, goal=12.5))
        assert ctrl.preview == 13


class TestDebouncedPreview:
    """Tests for the debounced overall-percent preview."""

    def test_valid_input_schedules_one_timer(self, controller, scheduler):
        controller.set_overall_percent("150")
        assert controller.has_pending_timer
        assert list(scheduler.delays.values()) == [500]
        # Nothing computed until the timer fires
        assert controller.preview == 100

    def test_timer_publishes_quantity(self, controller, scheduler, previews):
        controller.set_overall_percent("150")
        scheduler.run_pending()
        assert controller.preview == 75
        assert previews[-1] == 75
        assert not controller.has_pending_timer

    def test_rapid_input_leaves_one_pending_timer(self, controller, scheduler, previews):
        for raw in ("1", "12", "120"):
            controller.set_overall_percent(raw)

        assert len(scheduler.pending) == 1
        assert len(scheduler.cancelled) == 2

        fired = scheduler.run_pending()
        assert fired == 1
        # Only the last value is computed: 50 * 120% = 60
        assert previews == [100, 60]

    @pytest.mark.parametrize("raw", ["", "abc", "0", "-20"])
    def test_invalid_input_shows_zero_without_timer(self, controller, scheduler, raw):
        controller.set_overall_percent(raw)
        assert controller.preview == 0
        assert not controller.has_pending_timer
        assert scheduler.pending == {}

    def test_invalid_input_cancels_pending_timer(self, controller, scheduler, previews):
        controller.set_overall_percent("150")
        controller.set_overall_percent("")
        assert scheduler.pending == {}
        assert scheduler.run_pending() == 0
        assert previews[-1] == 0

    def test_close_cancels_pending_timer(self, controller, scheduler, previews):
        controller.set_overall_percent("150")
        controller.close()
        assert scheduler.run_pending() == 0
        assert previews == [100]

    def test_reopen_cancels_pending_timer(self, controller, scheduler):
        controller.set_overall_percent("150")
        controller.open(make_recipe(output=10, goal=10))
        assert scheduler.pending == {}
        assert controller.preview == 10


class TestPartPercents:
    """Tests for staging per-part percents."""

    def test_numeric_entry_is_staged(self, controller):
        controller.set_part_percent(1, "90")
        assert controller.part_percents == [100, 90]

    def test_blank_entry_is_staged_as_none(self, controller):
        controller.set_part_percent(0, "  ")
        assert controller.part_percents == [None, 80]

    def test_non_numeric_entry_falls_back_to_100(self, controller):
        controller.set_part_percent(1, "abc")
        assert controller.part_percents == [100, 100]

    def test_index_past_end_extends_with_blanks(self, controller):
        controller.set_part_percent(3, "50")
        assert controller.part_percents == [100, 80, None, 50]
