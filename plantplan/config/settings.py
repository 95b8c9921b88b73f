"""Application settings

Pydantic Settings, loaded from environment variables and the .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
import os


class Settings(BaseSettings):
    """Application configuration"""

    APP_TITLE: str = "Plant Planner"
    APP_DESCRIPTION: str = "Slitting and plant production planning API"
    APP_VERSION: str = "1.0.0"

    # MySQL, used when DATABASE_URL is not given
    MYSQL_USER: str = "root"
    MYSQL_PASSWORD: str = "yourrootpw"
    MYSQL_HOST: str = "127.0.0.1"
    MYSQL_PORT: str = "3306"
    MYSQL_DB: str = "plant_db"

    # DATABASE_URL wins; otherwise a local dev.db, otherwise MySQL
    DATABASE_URL: str = ""
    ECHO_SQL: bool = False

    LOG_LEVEL: str = "INFO"

    # planning defaults
    DEFAULT_ROLL_LENGTH: float = 2000
    SPLIT_RUN_THRESHOLD_M: float = 50

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if not self.DATABASE_URL:
            if os.path.exists("dev.db"):
                self.DATABASE_URL = "sqlite:///./dev.db"
            else:
                self.DATABASE_URL = f"mysql+pymysql://{self.MYSQL_USER}:{self.MYSQL_PASSWORD}@{self.MYSQL_HOST}:{self.MYSQL_PORT}/{self.MYSQL_DB}"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
