from pydantic_settings import BaseSettings
import os

from tictactoe_engine.core.game_config import DEFAULT_DIMENSION

class Settings(BaseSettings):
    DEBUG: bool = os.getenv("DEBUG", "False") == "True"
    DEFAULT_DIMENSION: int = int(os.getenv("DEFAULT_DIMENSION", str(DEFAULT_DIMENSION)))

    class Config:
        env_file = ".env"

settings = Settings()
