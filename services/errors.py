from typing import Optional


class APIError(Exception):
    def __init__(self, message: str, status_code: int = 500, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details

    def to_dict(self) -> dict:
        body = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class MissingInput(APIError):
    def __init__(self, message: str = "No image uploaded"):
        super().__init__(message, status_code=400)


class NoDetection(APIError):
    def __init__(self, message: str = "No ingredients detected"):
        super().__init__(message, status_code=400)


class ProcessingError(APIError):
    def __init__(self, details: Optional[str] = None, message: str = "Image processing failed"):
        super().__init__(message, status_code=500, details=details)


class FetchError(APIError):
    def __init__(self, message: str = "Failed to fetch recipes", details: Optional[str] = None):
        super().__init__(message, status_code=500, details=details)
