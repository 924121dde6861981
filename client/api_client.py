# client/api_client.py
"""
Async REST client for the inventory listing endpoints.
"""
import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from config import settings
from api.assets.models import AssetPage, AssetRead, BulkAssetsResponse
from api.categories.models import CategoryPage
from api.locations.models import LocationPage

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class InventoryAPIError(Exception):
    """Raised when a request fails or the API answers with an error status."""

    def __init__(self, message: str, status_code: int | None = None, detail=None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class InventoryClient:
    """
    Thin wrapper over httpx.AsyncClient.

    Pass `http_client` to reuse an existing client (tests hand in one bound to
    the ASGI app); otherwise one is created from API_BASE_URL and closed by
    aclose() / the async context manager.
    """

    def __init__(
        self,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ):
        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(
                base_url=(base_url or settings.API_BASE_URL).rstrip("/"),
                timeout=timeout or settings.HTTP_TIMEOUT_SECONDS,
            )
        self._http = http_client

    async def __aenter__(self) -> "InventoryClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def _get(self, path: str, params: dict | None = None) -> dict | list:
        try:
            response = await self._http.get(path, params=params)
        except httpx.HTTPError as exc:
            raise InventoryAPIError(f"GET {path} failed: {exc}") from exc

        if response.status_code >= 400:
            detail = response.text
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict):
                detail = body.get("detail", detail)
            raise InventoryAPIError(
                f"API error ({response.status_code}) on GET {path}: {detail}",
                status_code=response.status_code,
                detail=detail,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise InventoryAPIError(
                f"Invalid JSON from GET {path}",
                status_code=response.status_code,
                detail=response.text,
            ) from exc

    async def _get_model(self, path: str, model: type[ModelT], params: dict | None = None) -> ModelT:
        body = await self._get(path, params=params)
        try:
            return model.model_validate(body)
        except ValidationError as exc:
            raise InventoryAPIError(
                f"Unexpected response shape from GET {path}",
                detail=exc.errors(),
            ) from exc

    async def list_assets(self, page: int = 1, page_size: int = 10) -> AssetPage:
        return await self._get_model(
            "/assets", AssetPage, params={"page": page, "page_size": page_size}
        )

    async def list_categories(self, page: int = 1, page_size: int = 10) -> CategoryPage:
        return await self._get_model(
            "/categories", CategoryPage, params={"page": page, "page_size": page_size}
        )

    async def list_locations(self, page: int = 1, page_size: int = 10) -> LocationPage:
        return await self._get_model(
            "/locations", LocationPage, params={"page": page, "page_size": page_size}
        )

    async def get_bulk_assets(self, bulk_id: str) -> list[AssetRead]:
        """Child assets of a bulk group."""
        body = await self._get_model(f"/assets/bulk/{bulk_id}", BulkAssetsResponse)
        return body.data
