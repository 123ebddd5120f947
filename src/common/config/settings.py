"""Application settings and environment variables."""

import os

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


class Settings:
    # Storage settings
    STORAGE_BACKEND: str = os.getenv("STORAGE_BACKEND", "json_file")  # json_file, mysql, memory
    STORAGE_FILE_PATH: str = os.getenv("STORAGE_FILE_PATH", os.path.join("data", "paint_shop_db.json"))
    STORAGE_KEY: str = os.getenv("STORAGE_KEY", "paintShopDB")

    DB_HOST: str = os.getenv("DB_HOST", "localhost")
    DB_DATABASE: str = os.getenv("DB_NAME", "paint_shop_db")
    DB_USER: str = os.getenv("DB_USER", "user")
    DB_PASSWORD: str = os.getenv("DB_PASSWORD", "password")

    # Inventory rules
    LOW_STOCK_THRESHOLD: int = int(os.getenv("LOW_STOCK_THRESHOLD", "5"))

    # Calendar days in activity reports are cut at midnight of this timezone
    REPORT_TIMEZONE: str = os.getenv("REPORT_TIMEZONE", "UTC")

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")  # INFO, DEBUG, WARNING, ERROR, CRITICAL


settings = Settings()
