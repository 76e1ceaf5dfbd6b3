import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

DEFAULT_PORT = 4000
SPOONACULAR_BASE_URL = "https://api.spoonacular.com"
RECIPE_RESULT_LIMIT = 10
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _split_origins(raw: str) -> List[str]:
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def _log_level(raw: str) -> str:
    level = raw.strip().upper()
    if level == "WARN":
        level = "WARNING"
    if level not in LOG_LEVELS:
        raise ValueError(f"Invalid LOG_LEVEL {raw!r}; expected one of {', '.join(LOG_LEVELS)}")
    return level


@dataclass
class Settings:
    port: int = DEFAULT_PORT
    spoonacular_api_key: str = ""
    spoonacular_base_url: str = SPOONACULAR_BASE_URL
    google_credentials_path: str = ""
    upload_dir: str = "uploads"
    request_timeout: float = 30.0
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings once from .env and the process environment."""
        load_dotenv()
        return cls(
            port=int(os.getenv("PORT") or DEFAULT_PORT),
            spoonacular_api_key=os.getenv("SPOONACULAR_API_KEY", ""),
            spoonacular_base_url=os.getenv("SPOONACULAR_BASE_URL") or SPOONACULAR_BASE_URL,
            google_credentials_path=os.getenv("GOOGLE_APPLICATION_CREDENTIALS", ""),
            upload_dir=os.getenv("UPLOAD_DIR") or "uploads",
            request_timeout=float(os.getenv("REQUEST_TIMEOUT") or 30),
            cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "*")),
            log_level=_log_level(os.getenv("LOG_LEVEL") or "INFO"),
        )

    @property
    def config_complete(self) -> bool:
        # An empty credentials path means Google default credentials are used
        return bool(self.spoonacular_api_key)

    @property
    def vision_credentials(self) -> str:
        return "service-account-file" if self.google_credentials_path else "default"
