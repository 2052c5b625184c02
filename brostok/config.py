from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "bro.stok"

    # Empty in-memory SQLite by default; point at a file or server DB to persist
    DATABASE_URL: str = "sqlite://"

    # Auth
    SECRET_KEY: str = "change-me"
    ACCESS_TOKEN_EXPIRE_HOURS: int = 72
    MIN_PASSWORD_LENGTH: int = 6
    DEFAULT_ADMIN_EMAIL: str = "admin@brostok.local"
    DEFAULT_ADMIN_PASSWORD: str = "admin123"

    # Variants with stock strictly below this are flagged on the dashboard
    LOW_STOCK_THRESHOLD: int = 10

    # Calendar days for history filters and report dates (stored times are UTC)
    DISPLAY_TIMEZONE: str = "Asia/Jakarta"

    LOAD_SAMPLE_DATA: bool = True

    model_config = {"env_file": ".env"}


settings = Settings()
