## Application settings configuration

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = "dev"

    # Origin the API-backed loaders call back into
    site_url: str = "http://localhost:8000"

    supported_languages: list[str] = ["en", "es"]
    default_language: str = "en"

    log_level: str = "INFO"

    # python -m academy
    host: str = "127.0.0.1"
    port: int = 8000

    @property
    def is_development(self) -> bool:
        return self.env == "dev"


settings = Settings()
