"""REST API client for Bybit."""

import dataclasses
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar

import aiohttp

from ..utils.config import Config
from ..utils.logger import DebugLogger, logger
from .classifier import (
    LegacyResponseValidator,
    ResponseValidator,
    V5ResponseValidator,
    classifier_for,
)
from .exceptions import ConfigurationError
from .request import (
    ApiGeneration,
    BodyEncoding,
    Credentials,
    PreparedRequest,
    build_legacy_json_request,
    build_legacy_request,
    build_public_request,
    build_v5_request,
    generation_for_path,
)
from .transport import Transport

if TYPE_CHECKING:
    from ..services.contract import FutureContractService
    from ..services.spot import SpotV1Service
    from ..services.v5_order import V5OrderService

T = TypeVar("T")


@dataclass(frozen=True)
class ClientConfig:
    """Per-client settings. Replaced wholesale by the RestClient.with_* calls."""

    base_url: str = field(default_factory=Config.get_rest_url)
    credentials: Credentials | None = None
    debug: bool = False
    logger: DebugLogger | None = None
    legacy_validator: ResponseValidator = field(default_factory=LegacyResponseValidator)
    v5_validator: ResponseValidator = field(default_factory=V5ResponseValidator)

    @property
    def has_auth(self) -> bool:
        return self.credentials is not None and self.credentials.is_complete

    def validator_for(self, generation: ApiGeneration) -> ResponseValidator:
        if generation is ApiGeneration.V5:
            return self.v5_validator
        return self.legacy_validator

    def validate(self) -> None:
        """
        Check the configuration before a request is built.

        Raises:
            ConfigurationError: If debug mode is on without a logger
        """
        if self.debug and self.logger is None:
            raise ConfigurationError("debug mode requires a logger")
        if not self.base_url:
            raise ConfigurationError("base_url must be set")


class RestClient:
    """Async REST client for Bybit legacy and v5 endpoints."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        session: aiohttp.ClientSession | None = None,
    ):
        self.config = config or ClientConfig()
        self.session = session
        self._owns_session = session is None
        self._started = False

    @classmethod
    def from_env(cls) -> "RestClient":
        """Create a client from BYBIT_ENVIRONMENT / BYBIT_API_KEY / BYBIT_API_SECRET."""
        client = cls()
        if Config.validate():
            client.with_auth(Config.API_KEY, Config.API_SECRET)
        return client

    async def __aenter__(self):
        """Context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        await self.close()

    async def connect(self) -> None:
        """Create aiohttp session unless one was injected."""
        if self.session is None or self.session.closed:
            timeout = aiohttp.ClientTimeout(total=Config.REST_TIMEOUT)
            self.session = aiohttp.ClientSession(timeout=timeout)
            self._owns_session = True
            logger.info(f"REST client connected to {self.config.base_url}")

    async def close(self) -> None:
        """Close the aiohttp session if this client created it."""
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()
            logger.info("REST client closed")

    # Configuration

    def _configure(self, **changes: Any) -> "RestClient":
        if self._started:
            raise ConfigurationError("client configuration is frozen once requests begin")
        self.config = dataclasses.replace(self.config, **changes)
        return self

    def with_auth(self, key: str, secret: str) -> "RestClient":
        """Set the API key pair. A complete pair cannot be replaced once set."""
        if self.config.has_auth:
            raise ConfigurationError("credentials are already set on this client")
        return self._configure(credentials=Credentials(key=key, secret=secret))

    def with_base_url(self, url: str) -> "RestClient":
        """Point the client at another host (mainnet alias, testnet, mock server)."""
        return self._configure(base_url=url)

    def with_debug(self, debug_logger: DebugLogger | None) -> "RestClient":
        """Enable debug logging of requests, responses and classification."""
        return self._configure(debug=True, logger=debug_logger)

    def with_response_validator(
        self, generation: ApiGeneration, validator: ResponseValidator
    ) -> "RestClient":
        """Swap the body validator of one API generation."""
        if generation is ApiGeneration.V5:
            return self._configure(v5_validator=validator)
        return self._configure(legacy_validator=validator)

    def with_session(self, session: aiohttp.ClientSession) -> "RestClient":
        """Use a caller-managed session; its pooling and timeouts apply as-is."""
        if self._started:
            raise ConfigurationError("client configuration is frozen once requests begin")
        self.session = session
        self._owns_session = False
        return self

    @property
    def has_auth(self) -> bool:
        """Whether key and secret are both set."""
        return self.config.has_auth

    # Transport primitives

    async def get_public(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        destination: type[T] = dict,
    ) -> T:
        """
        Call a public GET endpoint.

        Args:
            path: API path (e.g., "/spot/v1/symbols")
            params: Query parameters
            destination: Type to decode into (dict or a class with from_api)

        Returns:
            Decoded destination
        """
        self.config.validate()
        request = build_public_request(self.config.base_url, path, params)
        return await self._send(request, destination)

    async def get_private(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        destination: type[T] = dict,
    ) -> T:
        """
        Call a private GET endpoint, signed per the path's API generation.

        Raises:
            AuthenticationRequiredError: If key or secret is missing
        """
        self.config.validate()
        if generation_for_path(path) is ApiGeneration.V5:
            request = build_v5_request(
                self.config.base_url, path, "GET", self.config.credentials, params=params
            )
        else:
            request = build_legacy_request(
                self.config.base_url, path, "GET", params, self.config.credentials
            )
        return await self._send(request, destination)

    async def post_private(
        self,
        path: str,
        body: Mapping[str, Any] | str | bytes | None = None,
        destination: type[T] = dict,
        encoding: BodyEncoding = BodyEncoding.JSON,
    ) -> T:
        """
        Call a private POST endpoint.

        Args:
            path: API path
            body: Mapping, or already-encoded JSON (str/bytes)
            destination: Type to decode into
            encoding: JSON body or form body (form is legacy only)

        Raises:
            AuthenticationRequiredError: If key or secret is missing
            ValueError: Form encoding on a v5 path, or a non-mapping form body
        """
        self.config.validate()
        generation = generation_for_path(path)

        if encoding is BodyEncoding.FORM:
            if generation is ApiGeneration.V5:
                raise ValueError("v5 endpoints only accept JSON bodies")
            if body is not None and not isinstance(body, Mapping):
                raise ValueError("form body must be a mapping")
            request = build_legacy_request(
                self.config.base_url, path, "POST", body, self.config.credentials
            )
            return await self._send(request, destination)

        raw = self._encode_json(body)
        if generation is ApiGeneration.V5:
            request = build_v5_request(
                self.config.base_url, path, "POST", self.config.credentials, body=raw
            )
        else:
            request = build_legacy_json_request(
                self.config.base_url, path, raw, self.config.credentials
            )
        return await self._send(request, destination)

    async def delete_private(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        destination: type[T] = dict,
    ) -> T:
        """
        Call a private DELETE endpoint.

        Raises:
            AuthenticationRequiredError: If key or secret is missing
        """
        self.config.validate()
        if generation_for_path(path) is ApiGeneration.V5:
            request = build_v5_request(
                self.config.base_url, path, "DELETE", self.config.credentials, params=params
            )
        else:
            request = build_legacy_request(
                self.config.base_url, path, "DELETE", params, self.config.credentials
            )
        return await self._send(request, destination)

    @staticmethod
    def _encode_json(body: Mapping[str, Any] | str | bytes | None) -> bytes:
        if body is None:
            return b"{}"
        if isinstance(body, bytes):
            return body
        if isinstance(body, str):
            return body.encode("utf-8")
        return json.dumps(body).encode("utf-8")

    async def _send(self, request: PreparedRequest, destination: type[T]) -> T:
        self._started = True
        if self.session is None or self.session.closed:
            await self.connect()

        debug_logger = self.config.logger if self.config.debug else None
        response = await Transport(self.session, debug_logger).execute(request)

        classifier = classifier_for(
            request.generation,
            self.config.validator_for(request.generation),
            debug_logger,
        )
        return classifier.classify(response, destination)

    # Endpoint services

    def v5_order(self) -> "V5OrderService":
        from ..services.v5_order import V5OrderService

        return V5OrderService(self)

    def spot_v1(self) -> "SpotV1Service":
        from ..services.spot import SpotV1Service

        return SpotV1Service(self)

    def contract(self) -> "FutureContractService":
        from ..services.contract import FutureContractService

        return FutureContractService(self)
