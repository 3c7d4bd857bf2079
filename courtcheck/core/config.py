from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env from the project root so it loads regardless of cwd
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=(str(_ENV_FILE), ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Env
    env: str = "development"

    # CORS
    cors_origins: str = "http://localhost:3000"

    # Booking rules
    min_duration_minutes: int = 30
    # When set, only this exact duration is bookable, e.g. 60 for one-hour slots
    fixed_slot_minutes: int | None = None
    reject_past_dates: bool = True

    # JSON seed with the courts and their bookings. Empty means the built-in demo courts.
    resources_file: str = ""

    # Pricing
    currency: str = "USD"

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def resources_path(self) -> Path | None:
        if not self.resources_file:
            return None
        return Path(self.resources_file).expanduser()


settings = Settings()
