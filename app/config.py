from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./data.db"

    # JWT
    SECRET_KEY: str = "change-me-secret"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 10080  # 7 days

    # Backup export gate, empty means exports are always refused
    ADMIN_TOKEN: str = ""

    # Defaults for new users
    DEFAULT_CURRENCY: str = "ر.س"
    DEFAULT_TAX_INCOME: float = 15.0
    DEFAULT_TAX_EXPENSE: float = 15.0
    DEFAULT_MONTHLY_EXPENSE_CAP: float = 50000.0

    # Logging
    LOG_FILE: str = "app.log"
    LOG_LEVEL: str = "DEBUG"

    CORS_ORIGINS: list[str] = ["*"]

    class Config:
        env_file = ".env"

settings = Settings()
