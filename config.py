from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    project_name: str = "Address Book"
    api_version: str = "1.0.0"
    log_level: str = "INFO"
    log_file: str = Field("", description="Also write logs here when set")
    host: str = "127.0.0.1"
    port: int = 8000
    public_url: str = Field("", description="Origin used in hrefs, e.g. https://contacts.example.com")


settings = Settings()
