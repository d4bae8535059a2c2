"""
Plan models for the Bakery Plan Client.

A plan holds one or more recipes scaled to a production target. Each
recipe is organized into parts, and each part into ingredient lines.
These dataclasses mirror the backend's plan-detail response and are the
in-memory form used by the editing workflow.

Wire format uses camelCase keys; from_api() converts a response dict,
and the payload helpers build request bodies.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from src.utils.constants import DEFAULT_PERCENT, DEFAULT_UNIT

Quantity = Union[int, float, str]


@dataclass
class IngredientLine:
    """
    One ingredient line of a recipe part.

    Attributes:
        ingredient_id: Backend ingredient ID, or a session-local temporary ID
            for lines added in the editor (never sent to the backend)
        ingredient_name: Display name; the backend resolves identity by name
        unit: Unit of measurement (g, ml, 개)
        original_quantity: Unscaled amount from the base recipe
        customized_quantity: Plan-specific amount; free text while editing
    """

    ingredient_id: Optional[int]
    ingredient_name: str
    unit: str
    original_quantity: float = 0
    customized_quantity: Quantity = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "IngredientLine":
        return cls(
            ingredient_id=data.get("ingredientId"),
            ingredient_name=data.get("ingredientName") or "",
            unit=data.get("unit") or DEFAULT_UNIT,
            original_quantity=data.get("originalQuantity") or 0,
            customized_quantity=_quantity_or_blank(data.get("customizedQuantity")),
        )

    def clone(self) -> "IngredientLine":
        return IngredientLine(
            ingredient_id=self.ingredient_id,
            ingredient_name=self.ingredient_name,
            unit=self.unit,
            original_quantity=self.original_quantity,
            customized_quantity=self.customized_quantity,
        )


@dataclass
class Part:
    """
    A named group of ingredient lines within a recipe (e.g. dough, filling).

    Attributes:
        part_name: Group name; the backend names the single group of a one-group recipe "기본"
        percent: Scaling factor applied within this part
        ingredients: Ordered ingredient lines
    """

    part_name: str
    percent: float = DEFAULT_PERCENT
    ingredients: List[IngredientLine] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Part":
        return cls(
            part_name=data.get("partName") or "",
            percent=data.get("percent", DEFAULT_PERCENT),
            ingredients=[
                IngredientLine.from_api(item) for item in data.get("comparedIngredients") or []
            ],
        )

    @property
    def has_named_ingredient(self) -> bool:
        """True if any line in this part has a non-blank ingredient name."""
        return any(line.ingredient_name.strip() for line in self.ingredients)

    def clone(self) -> "Part":
        return Part(
            part_name=self.part_name,
            percent=self.percent,
            ingredients=[line.clone() for line in self.ingredients],
        )


@dataclass
class PlanRecipe:
    """
    A recipe attached to a plan, scaled to a goal quantity.

    Attributes:
        recipe_id: Backend recipe ID
        name: Server-authoritative recipe name
        description: Server-authoritative description
        custom_name: Finalized name shown once the plan is complete
        custom_description: Finalized/customizable description
        total_price: Ingredient cost of the scaled recipe
        output_quantity: Natural yield of the base recipe
        goal_quantity: Target yield for this plan (number or numeric string)
        percent: goal_quantity / output_quantity * 100, rounded
        parts: Ordered parts
        is_temp: True for plan-only recipe copies that must be named on completion
    """

    recipe_id: int
    name: str
    description: str = ""
    custom_name: str = ""
    custom_description: str = ""
    total_price: float = 0
    output_quantity: float = 0
    goal_quantity: Quantity = 0
    percent: float = DEFAULT_PERCENT
    parts: List[Part] = field(default_factory=list)
    is_temp: bool = False

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "PlanRecipe":
        return cls(
            recipe_id=data["recipeId"],
            name=data.get("recipeName") or "",
            description=data.get("recipeDescription") or "",
            custom_name=data.get("customRecipeName") or "",
            custom_description=data.get("customRecipeDescription") or "",
            total_price=data.get("totalPrice") or 0,
            output_quantity=data.get("outputQuantity") or 0,
            goal_quantity=_quantity_or_blank(data.get("goalQuantity"), blank=0),
            percent=data.get("percent", DEFAULT_PERCENT),
            parts=[Part.from_api(item) for item in data.get("comparedParts") or []],
            is_temp=bool(data.get("isTemp", False)),
        )

    @property
    def goal_quantity_number(self) -> float:
        """goal_quantity as a number; 0 if it is not numeric."""
        try:
            return float(self.goal_quantity)
        except (TypeError, ValueError):
            return 0.0

    @property
    def unit_cost(self) -> int:
        """Cost per produced item, rounded; 0 when there is no goal quantity."""
        goal = self.goal_quantity_number
        if goal <= 0:
            return 0
        return math.floor(self.total_price / goal + 0.5)

    def display_name(self, plan_complete: bool) -> str:
        """Name to show: the finalized custom name once the plan is complete."""
        return self.custom_name if plan_complete else self.name

    def display_description(self, plan_complete: bool) -> str:
        """Description to show; the customizable copy is the editable one."""
        if plan_complete:
            return self.custom_description
        return self.custom_description or self.description

    def clone(self) -> "PlanRecipe":
        """
        Structural copy of this recipe.

        Every nested part and line is rebuilt so the copy can be edited
        without touching the plan it came from.
        """
        return PlanRecipe(
            recipe_id=self.recipe_id,
            name=self.name,
            description=self.description,
            custom_name=self.custom_name,
            custom_description=self.custom_description,
            total_price=self.total_price,
            output_quantity=self.output_quantity,
            goal_quantity=self.goal_quantity,
            percent=self.percent,
            parts=[part.clone() for part in self.parts],
            is_temp=self.is_temp,
        )


@dataclass
class LackingIngredient:
    """
    An ingredient whose plan-wide requirement exceeds current stock.

    Computed by the backend; the client only renders it.
    """

    ingredient_id: Optional[int]
    name: str
    required_quantity: float
    current_stock: float
    lacking_quantity: float

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "LackingIngredient":
        return cls(
            ingredient_id=data.get("ingredientId"),
            name=data.get("name") or "",
            required_quantity=data.get("requiredQuantity") or 0,
            current_stock=data.get("currentStock") or 0,
            lacking_quantity=data.get("lackingQuantity") or 0,
        )


@dataclass
class PlanDetail:
    """
    Full plan as returned by GET /api/plans/{id}.

    Attributes:
        plan_id: Backend plan ID
        name: Plan name
        memo: Free-text memo
        is_complete: Terminal state; quantities and ingredients are read-only
        recipes: Recipes attached to the plan, in display order
        lacking_ingredients: Backend-computed shortages
    """

    plan_id: Optional[int]
    name: str
    memo: str = ""
    is_complete: bool = False
    recipes: List[PlanRecipe] = field(default_factory=list)
    lacking_ingredients: List[LackingIngredient] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "PlanDetail":
        return cls(
            plan_id=data.get("planId"),
            name=data.get("name") or "",
            memo=data.get("memo") or "",
            is_complete=bool(data.get("isComplete", False)),
            recipes=[PlanRecipe.from_api(item) for item in data.get("recipeDetails") or []],
            lacking_ingredients=[
                LackingIngredient.from_api(item) for item in data.get("lackIngredients") or []
            ],
        )

    @property
    def has_lacking_ingredients(self) -> bool:
        return len(self.lacking_ingredients) > 0

    def find_recipe_index(self, recipe_id: int) -> Optional[int]:
        """Return the position of recipe_id in this plan, or None."""
        for index, recipe in enumerate(self.recipes):
            if recipe.recipe_id == recipe_id:
                return index
        return None

    def contains_recipe(self, recipe_id: int) -> bool:
        return self.find_recipe_index(recipe_id) is not None


# ============================================================================
# Request payloads
# ============================================================================


def ingredients_payload(recipe: PlanRecipe) -> List[Dict[str, Any]]:
    """
    Build the body for PATCH .../recipes/{rid}/ingredients.

    Ingredient IDs are omitted; the backend matches ingredients by name.
    Quantities must already be validated as numeric.
    """
    return [
        {
            "partName": part.part_name,
            "ingredients": [
                {
                    "ingredientName": line.ingredient_name,
                    "unit": line.unit,
                    "quantity": _as_number(line.customized_quantity),
                }
                for line in part.ingredients
            ],
        }
        for part in recipe.parts
    ]


def part_percents_payload(parts: List[Part], percents: List[float]) -> List[Dict[str, Any]]:
    """Build the body for PATCH .../recipes/{rid}/ingredients/percent."""
    return [
        {"partName": part.part_name, "percent": percent}
        for part, percent in zip(parts, percents)
    ]


def _quantity_or_blank(value: Any, blank: Quantity = "") -> Quantity:
    if value is None:
        return blank
    return value


def _as_number(value: Quantity) -> Union[int, float]:
    number = float(value)
    return int(number) if number.is_integer() else number
