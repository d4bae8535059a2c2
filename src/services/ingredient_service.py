"""Ingredient service - ingredient lookup for recipe editing."""

from typing import List
from urllib.parse import quote

from src.models.catalog import IngredientSearchItem
from src.services.api_client import ApiClient
from src.utils.constants import SHOPPING_SEARCH_URL


def search_ingredients(client: ApiClient, keyword: str) -> List[IngredientSearchItem]:
    """Search stock ingredients by name.

    A blank keyword returns an empty list without contacting the backend.

    Args:
        client: API client
        keyword: Search text

    Returns:
        Matching ingredients
    """
    keyword = (keyword or "").strip()
    if not keyword:
        return []

    data = client.get("/api/ingredients", params={"keyword": keyword})
    return [
        IngredientSearchItem.from_api(item) for item in (data or {}).get("ingredients") or []
    ]


def shopping_url(ingredient_name: str) -> str:
    """Web shop search URL for buying a lacking ingredient."""
    return SHOPPING_SEARCH_URL.format(query=quote(ingredient_name.strip()))
