"""
Asset Queries

Fetches the assets (NFTs) of a collection, either restricted to the
templates that carry given metadata fields or filtered by field values.
"""

import logging
from typing import Any, Mapping, Sequence

from .errors import ExplorerError, LookupFailure, MalformedResultError
from .explorer_context import ExplorerApi
from .fields import FieldDiscovery, collect_template_ids
from .filters import FilterValue, QueryValue, build_filter_params, build_nation_params
from .result import Result


logger = logging.getLogger(__name__)

Asset = dict[str, Any]


class AssetQueries:
    """Asset lookups driven by template fields or field filters"""

    def __init__(self, explorer: ExplorerApi, discovery: FieldDiscovery | None = None):
        """
        Initialize asset queries

        Args:
            explorer: Explorer API used for asset listings
            discovery: Field discovery used to find templates (default: one
                built on the same explorer)
        """
        self.explorer = explorer
        self.discovery = discovery or FieldDiscovery(explorer)

    async def fetch_by_discovered_fields(
        self, collection_name: str, fields_to_check: Sequence[str] | None = None
    ) -> Result[list[Asset]]:
        """
        Fetch the assets of every template carrying at least one requested field

        Returns:
            Result holding the assets in explorer order, or an empty list when
            no template matched. Scan and listing failures are passed on.
        """
        scanned = await self.discovery.scan_templates(collection_name, fields_to_check)
        if not scanned.ok:
            logger.error(f"Error retrieving NFTs with fields: {str(scanned.error)}")
            return Result.failure(scanned.error)

        template_ids = collect_template_ids(scanned.value)
        if not template_ids:
            logger.warning(f"No templates found with the specified fields in '{collection_name}'")
            return Result.success([])

        try:
            assets = await self.explorer.get_assets(
                {"collection_name": collection_name, "template_ids": ",".join(template_ids)}
            )
        except ExplorerError as e:
            logger.error(f"Error retrieving NFTs with fields: {str(e)}")
            return Result.failure(e)
        except Exception as e:
            logger.error(f"Unexpected error retrieving NFTs with fields: {str(e)}")
            return Result.failure(LookupFailure(f"Failed to fetch assets for '{collection_name}': {str(e)}"))

        if assets is None:
            assets = []
        if not isinstance(assets, list):
            error = MalformedResultError("NFT data could not be parsed")
            logger.error(f"Error retrieving NFTs with fields: {str(error)}")
            return Result.failure(error)

        logger.info(f"Retrieved {len(assets)} NFTs from {len(template_ids)} templates in '{collection_name}'")
        return Result.success(assets)

    async def fetch_by_field_filters(
        self, collection_name: str, field_filters: Mapping[str, FilterValue] | None = None
    ) -> Result[list[Asset]]:
        """
        Fetch the assets of a collection matching field value filters

        Args:
            collection_name: Collection to query
            field_filters: Field name to expected value; the value type picks
                the ``bool``, ``number`` or ``text`` data filter

        Returns:
            Result holding the matching assets. Fails with MalformedResultError
            when the explorer returns no asset list.
        """
        logger.info(f"Fetching NFTs for collection: {collection_name}")
        logger.info(f"Using field filters: {dict(field_filters or {})}")
        return await self._fetch_filtered(collection_name, build_filter_params(field_filters))

    async def fetch_by_nation(
        self,
        collection_name: str,
        nation_code: str = "",
        field_filters: Mapping[str, FilterValue] | None = None,
    ) -> Result[list[Asset]]:
        """
        Fetch the assets of a collection for a nation code plus field filters

        Args:
            collection_name: Collection to query
            nation_code: ISO 3166 alpha-3 nation code, matched upper-cased;
                empty to skip the nation filter
            field_filters: Additional field filters; a ``nation`` entry here
                replaces the nation code filter
        """
        logger.info(f"Fetching NFTs for collection: {collection_name}")
        logger.info(f"Using nation '{nation_code}' and field filters: {dict(field_filters or {})}")
        return await self._fetch_filtered(collection_name, build_nation_params(nation_code, field_filters))

    async def _fetch_filtered(self, collection_name: str, filter_params: dict[str, QueryValue]) -> Result[list[Asset]]:
        if not collection_name:
            return Result.failure(ExplorerError("collection_name is required"))

        logger.debug(f"Constructed filter parameters: {filter_params}")

        try:
            assets = await self.explorer.get_assets({"collection_name": collection_name, **filter_params})
            if not isinstance(assets, list):
                raise MalformedResultError("NFT data could not be parsed")
        except ExplorerError as e:
            logger.error(f"Error retrieving NFTs by field: {str(e)}")
            return Result.failure(e)
        except Exception as e:
            logger.error(f"Unexpected error retrieving NFTs by field: {str(e)}")
            return Result.failure(LookupFailure(f"Failed to fetch assets for '{collection_name}': {str(e)}"))

        logger.info(f"Retrieved {len(assets)} NFTs with specified field filters")
        return Result.success(assets)
