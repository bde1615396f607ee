"""Client variant bound to the Bybit test network."""

import os

import aiohttp

from ..utils.config import Config
from .exceptions import ConfigurationError
from .rest import ClientConfig, RestClient


class TestnetClient(RestClient):
    """RestClient defaulting to the testnet host, with credentials from the environment."""

    __test__ = False  # not a pytest test class

    def __init__(
        self,
        config: ClientConfig | None = None,
        session: aiohttp.ClientSession | None = None,
    ):
        super().__init__(config or ClientConfig(base_url=Config.TESTNET_URL), session)

    def with_auth_from_env(self) -> "TestnetClient":
        """
        Read the key pair from BYBIT_TEST_KEY and BYBIT_TEST_SECRET.

        Raises:
            ConfigurationError: If either variable is missing
        """
        key = os.environ.get(Config.TEST_KEY_ENV)
        if key is None:
            raise ConfigurationError(f"need {Config.TEST_KEY_ENV} as environment variable")
        secret = os.environ.get(Config.TEST_SECRET_ENV)
        if secret is None:
            raise ConfigurationError(f"need {Config.TEST_SECRET_ENV} as environment variable")

        self.with_auth(key, secret)
        return self
