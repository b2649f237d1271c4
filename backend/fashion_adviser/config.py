import json
import os
from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic.alias_generators import to_snake
from pydantic_settings import BaseSettings


class FieldCasing(str, Enum):
    """Key casing the decision service expects for a request variant."""
    LOWER = "lower"
    PASCAL = "pascal"


class Settings(BaseSettings):
    # Identity provider (client-credentials grant)
    token_url: str = Field(min_length=1)
    client_id: str = Field(min_length=1)
    client_secret: str = Field(min_length=1)
    scope: str = Field(min_length=1)

    # Decision service
    decision_service_url: str = Field(min_length=1)

    # HTTP
    http_timeout: float | None = 30.0  # seconds, None waits forever

    # Outcome routing: send 4xx/5xx transport failures to status4xx/status5xx
    route_status_outcomes: bool = False

    # Request key casing per variant
    trip_field_casing: FieldCasing = FieldCasing.LOWER
    weather_field_casing: FieldCasing = FieldCasing.PASCAL

    model_config = {
        "env_prefix": "FASHION_ADVISER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @classmethod
    def from_json_file(cls, path: str | Path) -> "Settings":
        """Load settings from a JSON file using camelCase keys (tokenUrl, clientId, ...).

        Values in the file take precedence over environment variables.
        """
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls(**{to_snake(key): value for key, value in raw.items()})


@lru_cache
def get_settings() -> Settings:
    """Resolve settings once per process. Raises ValidationError if anything required is missing."""
    config_file = os.environ.get("FASHION_ADVISER_CONFIG_FILE")
    if config_file:
        return Settings.from_json_file(config_file)
    return Settings()
