from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="AGECALC_", extra="ignore")

    app_name: str = "Age Calculator"
    min_year: int = Field(default=1000, ge=1, description="Earliest accepted birth year")
    log_level: str = "INFO"
    log_json: bool = Field(default=False, description="Emit one JSON object per log line")

settings = Settings()
