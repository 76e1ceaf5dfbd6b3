from urllib.parse import quote
from typing import Any, List, Union

import requests

from services.config import RECIPE_RESULT_LIMIT, SPOONACULAR_BASE_URL


class SpoonacularClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = SPOONACULAR_BASE_URL,
        timeout: float = 30.0,
        result_limit: int = RECIPE_RESULT_LIMIT,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.result_limit = result_limit

    def find_by_ingredients(self, ingredients: List[str]) -> Any:
        params = {
            "ingredients": ",".join(ingredients),
            "number": self.result_limit,
            "apiKey": self.api_key,
        }
        return self._get("/recipes/findByIngredients", params)

    def recipe_information(self, recipe_id: Union[str, int]) -> Any:
        path = f"/recipes/{quote(str(recipe_id), safe='')}/information"
        return self._get(path, {"apiKey": self.api_key})

    def _get(self, path: str, params: dict) -> Any:
        try:
            resp = requests.get(f"{self.base_url}{path}", params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise RuntimeError(f"Spoonacular request failed: {e}") from e
        if not resp.ok:
            raise RuntimeError(f"Spoonacular API failed[{resp.status_code}]: {resp.text[:200]}")
        try:
            return resp.json()
        except ValueError as e:
            raise RuntimeError(f"Spoonacular returned invalid JSON: {e}") from e
