"""Plan service - backend calls for baking plans.

Each function performs exactly one request through the supplied ApiClient
and returns parsed models where the endpoint returns data. None of them
touch client-side state; callers re-fetch the plan afterwards.

Endpoints:
    GET    /api/plans?page={n}                              list_plans
    POST   /api/plans                                       create_plan
    GET    /api/plans/{id}                                  get_plan_detail
    POST   /api/plans/{id}                                  complete_plan
    DELETE /api/plans/{id}                                  delete_plan
    PATCH  /api/plans/{id}/memo                             update_memo
    POST   /api/plans/{id}/recipes                          add_recipe
    DELETE /api/plans/{id}/recipes/{rid}                    remove_recipe
    PATCH  /api/plans/{id}/recipes/{rid}/output             update_goal_quantity
    PATCH  /api/plans/{id}/recipes/{rid}/output/percent     update_overall_percent
    PATCH  /api/plans/{id}/recipes/{rid}/ingredients/percent update_part_percents
    PATCH  /api/plans/{id}/recipes/{rid}/ingredients        update_ingredients
    PATCH  /api/plans/{id}/recipes/{rid}/reset              reset_recipe
    PATCH  /api/plans/{id}/recipes/{rid}/description        update_description
"""

import logging
from typing import Any, Dict, List

from src.models.catalog import PlanPage
from src.models.plan import (
    PlanDetail,
    PlanRecipe,
    Part,
    ingredients_payload,
    part_percents_payload,
)
from src.services.api_client import ApiClient
from src.services.exceptions import ApiError
from src.services.logging_utils import get_service_logger, log_operation

logger = get_service_logger(__name__)


def _plan_path(plan_id: int) -> str:
    return f"/api/plans/{plan_id}"


def _recipe_path(plan_id: int, recipe_id: int) -> str:
    return f"/api/plans/{plan_id}/recipes/{recipe_id}"


# =============================================================================
# Plans
# =============================================================================


def list_plans(client: ApiClient, page: int = 0) -> PlanPage:
    """Fetch one page of the plan list (zero-based page index)."""
    data = client.get("/api/plans", params={"page": page})
    return PlanPage.from_api(data or {})


def create_plan(client: ApiClient, recipe_ids: List[int]) -> int:
    """Create a plan from recipes.

    Args:
        client: API client
        recipe_ids: Recipes to include, in display order

    Returns:
        The new plan's ID

    Raises:
        ApiError: If the request fails or no planId comes back
    """
    data = client.post("/api/plans", json={"recipes": list(recipe_ids)})
    plan_id = (data or {}).get("planId")
    if not plan_id:
        raise ApiError("Server did not return the new plan")
    log_operation(logger, operation="create_plan", outcome="success", plan_id=plan_id)
    return plan_id


def get_plan_detail(client: ApiClient, plan_id: int) -> PlanDetail:
    """
    Fetch a plan with its recipes, parts, lines and lacking ingredients.

    Raises:
        ApiError: If the request fails or the plan data cannot be read
    """
    data = client.get(_plan_path(plan_id))
    if data is None:
        raise ApiError("Server returned an empty plan")
    try:
        detail = PlanDetail.from_api(data)
    except (KeyError, TypeError, AttributeError, ValueError) as e:
        log_operation(
            logger,
            operation="get_plan_detail",
            outcome="unreadable",
            level=logging.WARNING,
            plan_id=plan_id,
            error=str(e),
        )
        raise ApiError("Server returned an unreadable plan", context={"plan_id": plan_id}) from e
    if detail.plan_id is None:
        detail.plan_id = plan_id
    return detail


def delete_plan(client: ApiClient, plan_id: int) -> None:
    client.delete(_plan_path(plan_id))
    log_operation(logger, operation="delete_plan", outcome="success", plan_id=plan_id)


def update_memo(client: ApiClient, plan_id: int, memo: str) -> None:
    client.patch(f"{_plan_path(plan_id)}/memo", json={"newMemo": memo})


def complete_plan(client: ApiClient, plan_id: int, renames: List[Dict[str, Any]]) -> None:
    """Mark a plan complete, finalizing names of its temporary recipes.

    Args:
        client: API client
        plan_id: Plan to complete
        renames: [{"recipeId", "newName", "newDescription"}, ...]
    """
    client.post(_plan_path(plan_id), json={"recipes": renames})
    log_operation(
        logger, operation="complete_plan", outcome="success", plan_id=plan_id, renamed=len(renames)
    )


# =============================================================================
# Recipes within a plan
# =============================================================================


def add_recipe(client: ApiClient, plan_id: int, recipe_id: int) -> None:
    client.post(f"{_plan_path(plan_id)}/recipes", json={"recipeId": recipe_id})


def remove_recipe(client: ApiClient, plan_id: int, recipe_id: int) -> None:
    client.delete(_recipe_path(plan_id, recipe_id))


def update_goal_quantity(client: ApiClient, plan_id: int, recipe_id: int, goal: float) -> None:
    """Set a recipe's goal quantity directly."""
    client.patch(f"{_recipe_path(plan_id, recipe_id)}/output", json={"newOutput": goal})


def update_overall_percent(
    client: ApiClient, plan_id: int, recipe_id: int, percent: float
) -> None:
    """Scale a recipe's goal quantity by percent of its base output.

    The raw percent is sent; the backend computes the resulting goal.
    """
    client.patch(
        f"{_recipe_path(plan_id, recipe_id)}/output/percent", json={"newPercent": percent}
    )


def update_part_percents(
    client: ApiClient,
    plan_id: int,
    recipe_id: int,
    parts: List[Part],
    percents: List[float],
) -> None:
    client.patch(
        f"{_recipe_path(plan_id, recipe_id)}/ingredients/percent",
        json=part_percents_payload(parts, percents),
    )


def update_ingredients(client: ApiClient, plan_id: int, recipe: PlanRecipe) -> None:
    """Replace a recipe's parts and ingredient lines wholesale."""
    client.patch(
        f"{_recipe_path(plan_id, recipe.recipe_id)}/ingredients",
        json=ingredients_payload(recipe),
    )


def reset_recipe(client: ApiClient, plan_id: int, recipe_id: int) -> None:
    """Discard a recipe's customizations and revert to the base recipe."""
    client.patch(f"{_recipe_path(plan_id, recipe_id)}/reset")


def update_description(
    client: ApiClient, plan_id: int, recipe_id: int, description: str
) -> None:
    client.patch(
        f"{_recipe_path(plan_id, recipe_id)}/description",
        json={"newDescription": description},
    )
