"""Recipe service - recipe search used when adding recipes to a plan."""

from typing import List

from src.models.catalog import RecipeSearchItem
from src.services.api_client import ApiClient
from src.utils.constants import RECIPE_SEARCH_PAGE_SIZE, RECIPE_SEARCH_SORT


def search_recipes(client: ApiClient, keyword: str) -> List[RecipeSearchItem]:
    """Search recipes by name.

    Returns the first page, sorted by name. A blank keyword returns an
    empty list without contacting the backend.

    Args:
        client: API client
        keyword: Search text

    Returns:
        Matching recipes
    """
    keyword = (keyword or "").strip()
    if not keyword:
        return []

    data = client.get(
        "/api/recipes",
        params={
            "page": 0,
            "size": RECIPE_SEARCH_PAGE_SIZE,
            "sortBy": RECIPE_SEARCH_SORT,
            "keyword": keyword,
        },
    )
    return [RecipeSearchItem.from_api(item) for item in (data or {}).get("content") or []]
