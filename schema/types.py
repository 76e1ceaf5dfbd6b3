from pydantic import BaseModel
from typing import List, Optional

class RecipeSearchRequest(BaseModel):
    ingredients: List[str]

class DetectedIngredients(BaseModel):
    detectedIngredients: List[str]

class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
