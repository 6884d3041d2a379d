import os
from dotenv import load_dotenv

load_dotenv()


def _optional_float(name: str) -> float | None:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


class Settings:
    UPTIME_API_URL: str | None = os.getenv("UPTIME_API_URL") or None
    UPTIME_API_TIMEOUT_SECONDS: float | None = _optional_float(
        "UPTIME_API_TIMEOUT_SECONDS"
    )
    UI_REFRESH_SECONDS: int = max(1, int(os.getenv("UI_REFRESH_SECONDS", 2)))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
