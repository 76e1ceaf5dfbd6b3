import pytest
from fastapi.testclient import TestClient
from unittest.mock import Mock

from main import create_app
from services.config import Settings
from services.spoonacular import SpoonacularClient
from services.vision_ocr import VisionOCR


@pytest.fixture
def settings(tmp_path):
    return Settings(
        spoonacular_api_key="test-key",
        google_credentials_path="/secrets/vision.json",
        upload_dir=str(tmp_path / "uploads"),
    )


@pytest.fixture
def vision_ocr():
    return Mock(spec=VisionOCR)


@pytest.fixture
def recipe_client():
    return Mock(spec=SpoonacularClient)


@pytest.fixture
def client(settings, vision_ocr, recipe_client):
    app = create_app(settings, vision_ocr=vision_ocr, recipe_client=recipe_client)
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def image_file():
    return {"image": ("fridge.jpg", b"\xff\xd8\xff\xe0 fake jpeg bytes", "image/jpeg")}
