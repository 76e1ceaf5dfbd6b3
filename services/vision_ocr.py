import logging
import threading
from typing import List, Optional

from google.cloud import vision

logger = logging.getLogger(__name__)


class VisionOCR:
    def __init__(self, credentials_path: str = "", timeout: Optional[float] = 30.0):
        self.credentials_path = credentials_path
        self.timeout = timeout
        self._client: Optional[vision.ImageAnnotatorClient] = None
        self._lock = threading.Lock()

    @property
    def client(self) -> vision.ImageAnnotatorClient:
        # Built on first use so the app starts without credentials present
        with self._lock:
            if self._client is None:
                if self.credentials_path:
                    self._client = vision.ImageAnnotatorClient.from_service_account_file(self.credentials_path)
                else:
                    self._client = vision.ImageAnnotatorClient()
                logger.info("Google Vision client initialised")
            return self._client

    def detect_text(self, image_path: str) -> List[str]:
        """
        Google Vision text_detection on a stored file.
        Returns the description of every text annotation; the first entry is
        the whole-image block, the rest are individual words.
        """
        with open(image_path, "rb") as f:
            content = f.read()
        response = self.client.text_detection(image=vision.Image(content=content), timeout=self.timeout)
        if response.error.message:
            raise RuntimeError(f"Google Vision error: {response.error.message}")
        return [a.description for a in response.text_annotations]


def clean_detected_lines(text: str) -> List[str]:
    """
    Split a detected text block into ingredient candidates.

    The first line is always dropped (Vision uses it as a summary of the whole block),
    then empty lines and lines of two characters or less are removed.
    """
    lines = text.split("\n")[1:]
    return [line for line in lines if line and len(line) > 2]
