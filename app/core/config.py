import os
import logging

from dotenv import load_dotenv


load_dotenv()

logger = logging.getLogger(__name__)


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class Settings:
    """Process configuration read from the environment (and an optional .env)."""

    def __init__(self) -> None:
        self.TWITCH_CLIENT_ID: str = os.getenv("TWITCH_CLIENT_ID", "")
        self.TWITCH_CLIENT_SECRET: str = os.getenv("TWITCH_CLIENT_SECRET", "")
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = int(os.getenv("PORT", "3000"))
        self.HTTP_TIMEOUT: float = float(os.getenv("HTTP_TIMEOUT", "10"))
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.RELOAD: bool = _env_bool("RELOAD")

    @property
    def http_timeout(self) -> float | None:
        # 0 disables the outbound timeout
        return self.HTTP_TIMEOUT or None


settings = Settings()

if not settings.TWITCH_CLIENT_ID or not settings.TWITCH_CLIENT_SECRET:
    logger.warning("TWITCH_CLIENT_ID / TWITCH_CLIENT_SECRET not set. IGDB requests will fail.")
