from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Settings configuration
class Settings(BaseSettings):
    host: str = Field(default='127.0.0.1', alias='HOST')
    port: int = Field(default=8000, alias='PORT')
    frontend_port: int = Field(default=3000, alias='FRONTEND_PORT')
    backend_url: str = Field(
        default='http://127.0.0.1:8000',
        alias='BACKEND_URL'
    )
    request_timeout: float = Field(default=5.0, alias='REQUEST_TIMEOUT')
    cors_origins: str = Field(
        default='http://localhost:3000',
        alias='CORS_ORIGINS'
    )
    log_level: str = Field(default='INFO', alias='LOG_LEVEL')
    log_file: str = Field(default='', alias='LOG_FILE')

    model_config = SettingsConfigDict(case_sensitive=True, populate_by_name=True)

    @property
    def allowed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(',') if origin.strip()]
