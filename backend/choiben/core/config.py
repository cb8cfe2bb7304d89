from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_NAME: str = "Choiben API"
    API_V1_PREFIX: str = "/api/v1"

    # AI TODO suggestion backend
    AI_BACKEND_URL: str = "https://choiben-back.youkan.uk"
    API_SECRET_KEY: str = ""
    AI_TIMEOUT_SECONDS: float = 60.0

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
