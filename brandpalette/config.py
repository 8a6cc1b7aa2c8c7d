from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "Brand Palette API"
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False  # include exception messages in 500 responses

    # upper bound for the seed supplied when a request omits one (32-bit)
    MAX_RANDOM_SEED: int = 4294967295

    # local dev origins; override via env in production
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:3000"

    HOST: str = "127.0.0.1"
    PORT: int = 8000

    class Config:
        env_file = ".env"


settings = Settings()
