"""
Catalog models: plan list entries and search results.

Lightweight read-only records returned by list and search endpoints.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class PlanSummary:
    """One row of the plan list."""

    plan_id: int
    plan_name: str
    recipe_names: List[str] = field(default_factory=list)
    recipe_count: int = 0
    is_complete: bool = False

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "PlanSummary":
        return cls(
            plan_id=data["planId"],
            plan_name=data.get("planName") or "",
            recipe_names=list(data.get("recipeNames") or []),
            recipe_count=data.get("recipeCount") or 0,
            is_complete=bool(data.get("isComplete", False)),
        )


@dataclass
class PlanPage:
    """
    One page of the plan list.

    Attributes:
        plans: Plans on this page
        page_number: Zero-based page index
        total_pages: Number of pages available
    """

    plans: List[PlanSummary]
    page_number: int = 0
    total_pages: int = 1

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "PlanPage":
        pageable = data.get("pageable") or {}
        return cls(
            plans=[PlanSummary.from_api(item) for item in data.get("content") or []],
            page_number=pageable.get("pageNumber", 0),
            total_pages=data.get("totalPages", 1),
        )

    @property
    def has_next(self) -> bool:
        return self.page_number + 1 < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page_number > 0


@dataclass
class RecipeSearchItem:
    """A recipe found by the add-recipe search."""

    recipe_id: int
    recipe_name: str
    output_quantity: float = 0
    favorite: bool = False

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "RecipeSearchItem":
        return cls(
            recipe_id=data["recipeId"],
            recipe_name=data.get("recipeName") or "",
            output_quantity=data.get("outputQuantity") or 0,
            favorite=bool(data.get("favorite", False)),
        )


@dataclass
class IngredientSearchItem:
    """An ingredient found by the ingredient search."""

    ingredient_id: Optional[int]
    name: str
    unit: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "IngredientSearchItem":
        return cls(
            ingredient_id=data.get("ingredientId"),
            name=data.get("ingredientName") or data.get("name") or "",
            unit=data.get("unit"),
        )
