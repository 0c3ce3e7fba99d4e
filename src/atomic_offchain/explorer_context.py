"""
Explorer Context Management

Connection to the AtomicAssets explorer API. Exposes the three read-only
listings the field discovery and asset filter operations depend on:
schemas of a collection, templates of a schema, and assets matching query
parameters.
"""

import logging
from typing import Any, Protocol

import httpx

from .config import ExplorerSettings
from .errors import LookupFailure


logger = logging.getLogger(__name__)


class ExplorerApi(Protocol):
    """Read-only listings consumed from the explorer API"""

    async def get_schemas(self, collection_name: str) -> list[dict[str, Any]]:
        ...

    async def get_templates(
        self, schema_name: str, collection_name: str | None = None
    ) -> list[dict[str, Any]]:
        ...

    async def get_assets(self, params: dict[str, Any]) -> list[dict[str, Any]] | None:
        ...


class AtomicExplorerContext:
    """Manages the HTTP connection to an AtomicAssets explorer API"""

    def __init__(self, settings: ExplorerSettings | None = None, client: httpx.AsyncClient | None = None):
        """
        Initialize explorer context

        Args:
            settings: Explorer settings (default: loaded from environment)
            client: Pre-built httpx client; one is created and owned by the
                context when omitted
        """
        self.settings = settings or ExplorerSettings()
        self.api_root = self.settings.api_root

        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=self.settings.request_timeout)

    async def __aenter__(self) -> "AtomicExplorerContext":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this context created it"""
        if self._owns_client:
            await self.client.aclose()

    async def get_schemas(self, collection_name: str) -> list[dict[str, Any]]:
        """List the schemas of a collection"""
        data = await self._get("schemas", {"collection_name": collection_name})
        return data or []

    async def get_templates(
        self, schema_name: str, collection_name: str | None = None
    ) -> list[dict[str, Any]]:
        """List the templates of a schema, optionally restricted to one collection"""
        params = {"schema_name": schema_name}
        if collection_name:
            params["collection_name"] = collection_name
        data = await self._get("templates", params)
        return data or []

    async def get_assets(self, params: dict[str, Any]) -> list[dict[str, Any]] | None:
        """
        List assets matching explorer query parameters

        The payload is passed through untouched; an empty or missing data
        field is left for the caller to judge.
        """
        return await self._get("assets", params)

    async def _get(self, resource: str, params: dict[str, Any]) -> Any:
        """
        Issue a GET against an explorer resource and unwrap its data envelope

        Raises:
            LookupFailure: On transport errors, non-2xx responses, invalid
                JSON or an unsuccessful envelope
        """
        url = f"{self.api_root}/{resource}"
        query = {"limit": self.settings.page_limit, **params}
        logger.debug(f"GET {url} params={query}")

        try:
            response = await self.client.get(url, params=query)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            raise LookupFailure(
                f"Explorer API returned {e.response.status_code} for {resource}: {e.response.text}"
            ) from e
        except httpx.HTTPError as e:
            raise LookupFailure(f"Explorer API request failed for {resource}: {str(e)}") from e
        except ValueError as e:
            raise LookupFailure(f"Explorer API returned invalid JSON for {resource}") from e

        if not isinstance(payload, dict) or not payload.get("success", False):
            message = payload.get("message") if isinstance(payload, dict) else None
            raise LookupFailure(f"Explorer API rejected {resource} query: {message or 'unsuccessful response'}")

        return payload.get("data")
