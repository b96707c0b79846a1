import os
from pydantic import BaseModel

class Settings(BaseModel):
    # Basic
    ENV: str = os.getenv("ENV", "dev")
    VERSION: str = "0.1.1"

    # Remote service
    W3W_API_KEY: str = os.getenv("W3W_API_KEY", "")
    W3W_BASE_URL: str = os.getenv("W3W_BASE_URL", "https://api.what3words.com/v3")
    W3W_TIMEOUT_SECONDS: float = float(os.getenv("W3W_TIMEOUT_SECONDS", "10"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS (demo service)
    ALLOW_ORIGINS: str = os.getenv("ALLOW_ORIGINS", "*")

    # Metrics
    PROMETHEUS_ENABLED: bool = os.getenv("PROMETHEUS_ENABLED", "true").lower() == "true"

settings = Settings()
