"""Tests for pre-submit validation."""

import pytest

from src.models.plan import IngredientLine, Part, PlanRecipe
from src.services.exceptions import ValidationError
from src.services.planning.submission import (
    validate_goal_quantity,
    validate_ingredients_for_submit,
)
from src.utils.constants import ERROR_INGREDIENTS_INCOMPLETE, ERROR_QUANTITY_NOT_NUMERIC


def recipe_with_line(name="Flour", quantity="500", unit="g"):
    return PlanRecipe(
        recipe_id=1,
        name="Bread",
        parts=[
            Part(part_name="dough", ingredients=[IngredientLine(1, "Water", "ml", 300, 300)]),
            Part(part_name="topping", ingredients=[IngredientLine(2, name, unit, 0, quantity)]),
        ],
    )


class TestValidateIngredientsForSubmit:
    """Tests for validate_ingredients_for_submit."""

    @pytest.mark.parametrize("quantity", ["500", 500, 12.5, " 7 "])
    def test_valid_lines_pass(self, quantity):
        validate_ingredients_for_submit(recipe_with_line(quantity=quantity))

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"name": ""},
            {"name": "   "},
            {"quantity": ""},
            {"quantity": "  "},
            {"quantity": None},
            {"unit": ""},
        ],
    )
    def test_incomplete_line_is_rejected(self, kwargs):
        with pytest.raises(ValidationError) as exc:
            validate_ingredients_for_submit(recipe_with_line(**kwargs))
        assert exc.value.errors == [ERROR_INGREDIENTS_INCOMPLETE]

    @pytest.mark.parametrize("quantity", ["abc", "1,000", "12g"])
    def test_non_numeric_quantity_is_rejected(self, quantity):
        with pytest.raises(ValidationError) as exc:
            validate_ingredients_for_submit(recipe_with_line(quantity=quantity))
        assert exc.value.errors == [ERROR_QUANTITY_NOT_NUMERIC]


class TestValidateGoalQuantity:
    """Tests for validate_goal_quantity."""

    def test_whole_number_returned_as_int(self):
        goal = validate_goal_quantity("120")
        assert goal == 120
        assert isinstance(goal, int)

    def test_fractional_number_kept(self):
        assert validate_goal_quantity("12.5") == 12.5

    @pytest.mark.parametrize("raw", ["", "abc", "0", "-3", None])
    def test_invalid_goal_is_rejected(self, raw):
        with pytest.raises(ValidationError):
            validate_goal_quantity(raw)
