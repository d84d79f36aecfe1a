from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # App settings
    PROJECT_NAME: str = "Spendwise"
    API_PREFIX: str = "/api"
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")

    # Data and report locations
    DATA_FILE: str = Field(default="data/spending-data.json")
    REPORTS_DIR: str = Field(default="reports")

    # Alert thresholds
    HIGH_FREQUENCY_TRANSACTIONS: int = 20
    LARGE_AVERAGE_RATIO: float = 0.1  # average transaction vs. allocated budget
    CATEGORY_CONCENTRATION_PCT: float = 50.0


settings = Settings()
