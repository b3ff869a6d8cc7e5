"""Service configuration, read from the environment (and a local .env file)."""

from dataclasses import dataclass, field
import os

from dotenv import load_dotenv

load_dotenv()


def _flag(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    app_name: str = "RoadEye Vizag API"
    log_level: str = "INFO"
    seed_mock_data: bool = True
    # Demo-only: invent coordinates near the city centre when none are given
    allow_fallback_coordinates: bool = True
    default_reporter: str = "current-user"
    default_session: str = "default"
    # Least recently used session stores are dropped beyond this
    max_sessions: int = 1000
    geocoder_url: str = "https://nominatim.openstreetmap.org/reverse"
    geocoder_timeout: float = 5.0
    geocoder_user_agent: str = "roadeye-vizag/0.1"
    placeholder_image_url: str = "/placeholder.svg?height=300&width=400"
    cors_origins: list = field(default_factory=lambda: ["*"])


def get_settings():
    return Settings(
        app_name=os.getenv("APP_NAME", Settings.app_name),
        log_level=os.getenv("LOG_LEVEL", Settings.log_level).upper(),
        seed_mock_data=_flag("SEED_MOCK_DATA", True),
        allow_fallback_coordinates=_flag("ALLOW_FALLBACK_COORDINATES", True),
        default_reporter=os.getenv("DEFAULT_REPORTER", Settings.default_reporter),
        default_session=os.getenv("DEFAULT_SESSION", Settings.default_session),
        max_sessions=int(os.getenv("MAX_SESSIONS", Settings.max_sessions)),
        geocoder_url=os.getenv("GEOCODER_URL", Settings.geocoder_url),
        geocoder_timeout=float(os.getenv("GEOCODER_TIMEOUT", Settings.geocoder_timeout)),
        geocoder_user_agent=os.getenv("GEOCODER_USER_AGENT", Settings.geocoder_user_agent),
        placeholder_image_url=os.getenv("PLACEHOLDER_IMAGE_URL", Settings.placeholder_image_url),
        cors_origins=[o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()],
    )


settings = get_settings()
