from fastapi import Request

from services.config import Settings
from services.spoonacular import SpoonacularClient
from services.vision_ocr import VisionOCR


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_vision_ocr(request: Request) -> VisionOCR:
    return request.app.state.vision_ocr


def get_recipe_client(request: Request) -> SpoonacularClient:
    return request.app.state.recipe_client
