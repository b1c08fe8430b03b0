"""Runtime configuration for the greenhouse registry."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="GREENHOUSES_", env_file=".env", extra="ignore")

    app_name: str = "greenhouse-registry"
    log_level: str = "INFO"
    default_world: str = Field(
        default="world",
        description="World name used for islands and positions that do not declare one.",
    )
    default_island_range: int = Field(
        default=50,
        ge=0,
        description="Protection range for islands in layout files that omit it.",
    )
    layout_path: str | None = None


settings = Settings()
