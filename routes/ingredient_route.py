import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from routes.deps import get_settings, get_vision_ocr
from schema.types import DetectedIngredients, ErrorResponse
from services.config import Settings
from services.errors import MissingInput, NoDetection, ProcessingError
from services.uploads import stored_upload
from services.vision_ocr import VisionOCR, clean_detected_lines

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/detect-ingredients",
    response_model=DetectedIngredients,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def detect_ingredients(
    image: Optional[UploadFile] = File(None),
    settings: Settings = Depends(get_settings),
    ocr: VisionOCR = Depends(get_vision_ocr),
):
    if image is None or not image.filename:
        raise MissingInput()

    try:
        with stored_upload(image, settings.upload_dir) as path:
            blocks = ocr.detect_text(path)
    except Exception as e:
        logger.error("Image processing failed: %s", e, exc_info=True)
        raise ProcessingError(details=str(e)) from e

    if not blocks or not blocks[0]:
        raise NoDetection()
    return DetectedIngredients(detectedIngredients=clean_detected_lines(blocks[0]))
