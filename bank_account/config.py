"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="BANK_ACCOUNT_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Service
    service_name: str = "bank-account"
    log_level: str = "WARNING"

    # Demo account driven by the console entry point
    demo_customer_name: str = "Mr. Bryan Walton"
    demo_opening_balance: float = 11.99
    demo_credit_amount: float = 5.77
    demo_debit_amount: float = 11.22


settings = Settings()
