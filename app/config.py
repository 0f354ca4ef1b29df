"""Application configuration loaded from environment variables."""

import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    """Centralized application settings."""

    # Server
    APP_HOST: str = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT: int = int(os.getenv("APP_PORT", "5477"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Levies shared by every regime
    STANDARD_DEDUCTION: float = float(os.getenv("STANDARD_DEDUCTION", "50000"))
    CESS_RATE: float = float(os.getenv("CESS_RATE", "0.04"))  # Health & Education Cess

    # Display
    CURRENCY_SYMBOL: str = "₹"
    INFINITY_SYMBOL: str = "∞"


settings = Settings()
