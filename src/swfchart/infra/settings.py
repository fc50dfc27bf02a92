"""Environment-driven configuration for chart documents."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ChartSettings(BaseSettings):
    """Settings applied to every document a builder creates."""

    model_config = SettingsConfigDict(
        env_prefix="SWFCHART_",
        env_file=".env",
        extra="ignore",
    )

    license: str | None = Field(default=None, description="XML/SWF Charts license key written to <license>")
    pretty_print: bool = Field(default=False, description="Indent serialized XML")
