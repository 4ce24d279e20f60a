"""Settings for simple-webservice."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TIMEOUT_S = 60.0


class WebserviceSettings(BaseSettings):
    """Runtime settings for request execution."""

    model_config = SettingsConfigDict(
        env_prefix="SIMPLE_WEBSERVICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    timeout_s: float = Field(default=DEFAULT_TIMEOUT_S, gt=0)
