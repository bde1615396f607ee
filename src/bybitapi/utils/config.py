"""Configuration management."""

import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Environment defaults for Bybit REST clients.

    Values here are read once at import time and only seed a client's own
    ``ClientConfig``; nothing reads them per request.
    """

    # Environment: ['mainnet', 'mainnet2', 'testnet']
    ENVIRONMENT: str = os.getenv("BYBIT_ENVIRONMENT", "mainnet")

    # API credentials
    API_KEY: str = os.getenv("BYBIT_API_KEY", "")
    API_SECRET: str = os.getenv("BYBIT_API_SECRET", "")

    # Credentials for the testnet client
    TEST_KEY_ENV = "BYBIT_TEST_KEY"
    TEST_SECRET_ENV = "BYBIT_TEST_SECRET"

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # REST API URLs
    MAINNET_URL = "https://api.bybit.com"
    MAINNET_URL2 = "https://api.bytick.com"  # documented alias
    TESTNET_URL = "https://api-testnet.bybit.com"

    # Connection settings (client-owned session only)
    REST_TIMEOUT = int(os.getenv("REST_TIMEOUT", "10"))  # seconds

    @classmethod
    def get_rest_url(cls) -> str:
        """Get REST API URL based on environment."""
        if cls.ENVIRONMENT == "testnet":
            return cls.TESTNET_URL
        if cls.ENVIRONMENT == "mainnet2":
            return cls.MAINNET_URL2
        return cls.MAINNET_URL

    @classmethod
    def validate(cls) -> bool:
        """Validate configuration."""
        if not cls.API_KEY or not cls.API_SECRET:
            return False
        return True
