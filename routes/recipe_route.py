import logging

from fastapi import APIRouter, Depends

from routes.deps import get_recipe_client
from schema.types import ErrorResponse, RecipeSearchRequest
from services.errors import FetchError
from services.spoonacular import SpoonacularClient

logger = logging.getLogger(__name__)

router = APIRouter(responses={500: {"model": ErrorResponse}})


@router.post("/recipes")
def find_recipes(body: RecipeSearchRequest, client: SpoonacularClient = Depends(get_recipe_client)):
    """Recipes for the given ingredients, passed through from Spoonacular."""
    try:
        return client.find_by_ingredients(body.ingredients)
    except Exception as e:
        logger.error("Error fetching recipes: %s", e, exc_info=True)
        raise FetchError("Failed to fetch recipes", details=str(e)) from e


@router.get("/recipe/{recipe_id}")
def recipe_details(recipe_id: str, client: SpoonacularClient = Depends(get_recipe_client)):
    try:
        return client.recipe_information(recipe_id)
    except Exception as e:
        logger.error("Error fetching recipe details for %s: %s", recipe_id, e, exc_info=True)
        raise FetchError("Failed to fetch recipe details", details=str(e)) from e
