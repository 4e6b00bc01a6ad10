"""
Spaces Admin Client

HTTP client for the platform's /api routes.
Auto-initializes from SPACES_ADMIN_* environment variables or .env file.
"""

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from admin_core.config import Settings, get_settings
from admin_core.core.exceptions import ApiError, ClientValidationError, TransportError
from admin_core.services.resource_store import ResourceStore

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Request failed"


def _error_message(response: httpx.Response) -> tuple[str, Any]:
    """Extract ``{"error": "..."}`` from a failed response."""
    try:
        payload = response.json()
    except ValueError:
        return f"{GENERIC_ERROR_MESSAGE} ({response.status_code})", response.text or None
    if isinstance(payload, dict):
        message = payload.get("error") or payload.get("message") or payload.get("detail")
        if isinstance(message, str) and message:
            return message, payload
    return f"{GENERIC_ERROR_MESSAGE} ({response.status_code})", payload


class AdminClient:
    """
    HTTP client for the platform API.

    Singleton pattern - use get_client() to get the instance.
    """

    def __init__(
        self,
        api_url: str,
        api_token: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize client.

        Args:
            api_url: Platform base URL
            api_token: Optional bearer token
            timeout: Request timeout in seconds (None = no timeout)
            transport: Custom httpx transport (tests mount an ASGI app here)
        """
        self.api_url = api_url.rstrip("/")
        headers = {"Accept": "application/json"}
        if api_token:
            headers["Authorization"] = f"Bearer {api_token}"
        self._http = httpx.AsyncClient(
            base_url=self.api_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )
        # Data models already fetched through this client, keyed by id
        self.data_model_cache: ResourceStore[str, Any] = ResourceStore("data model")

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "AdminClient":
        settings = settings or get_settings()
        return cls(
            settings.api_url,
            api_token=settings.api_token,
            timeout=settings.request_timeout_seconds,
        )

    async def request(self, method: str, path: str, **kwargs: Any) -> Any:
        """
        Send a request and decode the JSON body.

        Returns:
            Decoded JSON, or None for an empty body

        Raises:
            TransportError: the request never got a response
            ApiError: the response status is not 2xx
        """
        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.TransportError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise TransportError(f"Network error: {e}") from e

        if response.is_error:
            message, payload = _error_message(response)
            logger.warning(f"{method} {path} -> {response.status_code}: {message}")
            raise ApiError(response.status_code, message, payload)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    async def get(self, path: str, **kwargs: Any) -> Any:
        """Make GET request."""
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> Any:
        """Make POST request."""
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> Any:
        """Make PUT request."""
        return await self.request("PUT", path, **kwargs)

    async def patch(self, path: str, **kwargs: Any) -> Any:
        """Make PATCH request."""
        return await self.request("PATCH", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> Any:
        """Make DELETE request."""
        return await self.request("DELETE", path, **kwargs)

    async def close(self):
        """Close HTTP client."""
        await self._http.aclose()


_client: AdminClient | None = None


def get_client() -> AdminClient:
    """Get the singleton client, building it from settings on first use."""
    global _client
    if _client is None:
        _client = AdminClient.from_settings()
    return _client


def set_client(client: AdminClient) -> None:
    """Inject a client (tests, embedding applications)."""
    global _client
    _client = client


def _clear_client() -> None:
    """Forget the current client. Test helper."""
    global _client
    _client = None


# ==================== PAYLOAD HELPERS ====================

T = TypeVar("T", bound=BaseModel)


def validated(model_cls: type[T], **values: Any) -> T:
    """
    Build a request model, turning validation failures into
    ClientValidationError so no request is issued.
    """
    try:
        return model_cls.model_validate(values)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or model_cls.__name__
        raise ClientValidationError(field, first["msg"]) from e


def request_body(model: BaseModel, partial: bool = False) -> dict[str, Any]:
    """JSON body of a request model; ``partial`` omits fields left unset."""
    return model.model_dump(mode="json", by_alias=True, exclude_unset=partial)


def unwrap_list(data: Any, *keys: str) -> list[Any]:
    """
    List payload from a response.

    Accepts a bare list or an object wrapping it under one of ``keys``.
    """
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        for key in keys:
            if isinstance(data.get(key), list):
                return data[key]
    return []


def unwrap_item(data: Any, *keys: str) -> Any:
    """Object payload, possibly wrapped under one of ``keys``."""
    if isinstance(data, dict):
        for key in keys:
            if isinstance(data.get(key), dict):
                return data[key]
    return data
