from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Vendor Smart API"
    app_env: str = "development"
    app_port: int = 8000
    frontend_url: str = "http://localhost:3000"

    # Reference catalog sources (loaded once at startup)
    locations_file: Path = Field(
        default=_DATA_DIR / "locations.json", alias="LOCATIONS_FILE",
    )
    services_file: Path = Field(
        default=_DATA_DIR / "services.json", alias="SERVICES_FILE",
    )

    # HTTP Basic credentials guarding every /api/v1/vendor-smart/* route
    auth_username: str = Field(default="vendorsmart", alias="AUTH_USERNAME")
    auth_password: str = Field(default="change-me", alias="AUTH_PASSWORD")

    # "sum" keeps the legacy sum-of-ids rule, "sequential" uses max(id) + 1
    job_id_strategy: Literal["sum", "sequential"] = Field(
        default="sum", alias="JOB_ID_STRATEGY",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def debug(self) -> bool:
        return self.app_env == "development"

settings = Settings()
