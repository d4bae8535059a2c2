"""Test doubles and backend payload builders shared by the plan client tests."""

from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock


class FakeScheduler:
    """Stand-in for a Tk widget's after()/after_cancel() pair.

    Timers only fire when the test calls run_pending().
    """

    def __init__(self):
        self._next_id = 0
        self.pending: Dict[str, Any] = {}
        self.delays: Dict[str, int] = {}
        self.cancelled: List[str] = []

    def after(self, ms, func):
        self._next_id += 1
        timer_id = f"after#{self._next_id}"
        self.pending[timer_id] = func
        self.delays[timer_id] = ms
        return timer_id

    def after_cancel(self, timer_id):
        self.cancelled.append(timer_id)
        self.pending.pop(timer_id, None)

    def run_pending(self) -> int:
        """Fire every pending timer; returns how many fired."""
        fired = 0
        while self.pending:
            timer_id = next(iter(self.pending))
            func = self.pending.pop(timer_id)
            func()
            fired += 1
        return fired


def make_response(
    data: Any = None,
    status_code: int = 200,
    result_code: Optional[str] = "OK",
    msg: Optional[str] = None,
    body: Any = ...,
) -> MagicMock:
    """Build a mock requests.Response carrying the backend envelope."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    if body is ...:
        body = {"resultCode": result_code, "msg": msg, "data": data}
    if isinstance(body, Exception):
        response.json.side_effect = body
    else:
        response.json.return_value = body
    return response


def line_data(name: str, quantity: Any = 100, unit: str = "g", ingredient_id: Optional[int] = None,
              original: Any = 100) -> Dict[str, Any]:
    return {
        "ingredientId": ingredient_id,
        "ingredientName": name,
        "unit": unit,
        "originalQuantity": original,
        "customizedQuantity": quantity,
    }


def part_data(name: str, lines: List[Dict[str, Any]], percent: float = 100) -> Dict[str, Any]:
    return {"partName": name, "percent": percent, "comparedIngredients": lines}


def recipe_data(
    recipe_id: int,
    name: str,
    output: float = 50,
    goal: Any = 50,
    parts: Optional[List[Dict[str, Any]]] = None,
    total_price: float = 5000,
    is_temp: bool = False,
    percent: Optional[float] = None,
) -> Dict[str, Any]:
    if parts is None:
        parts = [part_data("기본", [line_data("Flour", 500, ingredient_id=1), line_data("Butter", 200, ingredient_id=2)])]
    return {
        "recipeId": recipe_id,
        "recipeName": name,
        "recipeDescription": f"{name} description",
        "customRecipeName": f"{name} (custom)",
        "customRecipeDescription": "",
        "totalPrice": total_price,
        "outputQuantity": output,
        "goalQuantity": goal,
        "percent": percent if percent is not None else (goal / output * 100 if output else 100),
        "comparedParts": parts,
        "isTemp": is_temp,
    }


def plan_data(
    plan_id: int = 7,
    recipes: Optional[List[Dict[str, Any]]] = None,
    lacking: Optional[List[Dict[str, Any]]] = None,
    is_complete: bool = False,
) -> Dict[str, Any]:
    if recipes is None:
        recipes = [recipe_data(11, "Croissant"), recipe_data(12, "Baguette")]
    return {
        "planId": plan_id,
        "name": "Weekend bake",
        "memo": "",
        "isComplete": is_complete,
        "recipeDetails": recipes,
        "lackIngredients": lacking or [],
    }


def lacking_data(name: str, ingredient_id: Optional[int] = None, required: float = 700,
                 stock: float = 200) -> Dict[str, Any]:
    return {
        "ingredientId": ingredient_id,
        "name": name,
        "requiredQuantity": required,
        "currentStock": stock,
        "lackingQuantity": required - stock,
    }
