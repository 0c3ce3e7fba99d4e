"""
Asset Endpoints

FastAPI endpoints for AtomicAssets NFTs selected by discovered template
fields or by field value filters.
"""

import logging

from fastapi import APIRouter, Body, Depends, Path, Query

from atomic_offchain import AssetQueries
from fields_api.dependencies.explorer import get_asset_queries
from fields_api.schemas.fields import AssetListResponse, FieldErrorResponse, FieldFilterRequest
from fields_api.utils.errors import raise_for_result


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/{collection_name}/assets/discovered",
    response_model=AssetListResponse,
    summary="List assets by discovered fields",
    description="Get the assets of every template that carries at least one of the requested fields.",
    responses={
        401: {"model": FieldErrorResponse, "description": "Invalid or missing API key"},
        404: {"model": FieldErrorResponse, "description": "Collection has no schemas"},
        502: {"model": FieldErrorResponse, "description": "Explorer API error"},
    },
)
async def list_assets_by_discovered_fields(
    collection_name: str = Path(..., min_length=1, description="Collection name"),
    fields: list[str] | None = Query(None, description="Fields to look for (default: configured field list)"),
    queries: AssetQueries = Depends(get_asset_queries),
) -> AssetListResponse:
    """
    List the assets of templates carrying any of the requested fields.

    Returns an empty list when no template matches.
    """
    result = await queries.fetch_by_discovered_fields(collection_name, fields)
    raise_for_result(result, "query assets by discovered fields")

    return AssetListResponse(collection_name=collection_name, assets=result.value, total=len(result.value))


@router.post(
    "/{collection_name}/assets/search",
    response_model=AssetListResponse,
    summary="Search assets by field values",
    description="Get the assets of a collection matching field value filters and an optional nation code.",
    responses={
        401: {"model": FieldErrorResponse, "description": "Invalid or missing API key"},
        502: {"model": FieldErrorResponse, "description": "Explorer API error or unparseable asset data"},
    },
)
async def search_assets_by_field_filters(
    collection_name: str = Path(..., min_length=1, description="Collection name"),
    request: FieldFilterRequest | None = Body(None),
    queries: AssetQueries = Depends(get_asset_queries),
) -> AssetListResponse:
    """
    Search the assets of a collection by field values.

    **Filter typing:**
    - `true`/`false` -> `data:bool.<field>`
    - numbers -> `data:number.<field>`
    - anything else -> `data:text.<field>`

    A non-empty `nation` adds `data:text.nation` with the upper-cased code;
    a `nation` entry in `field_filters` takes precedence.
    """
    request = request or FieldFilterRequest()
    if request.nation:
        logger.info(f"Searching '{collection_name}' assets by nation '{request.nation}'")
        result = await queries.fetch_by_nation(collection_name, request.nation, request.field_filters)
    else:
        result = await queries.fetch_by_field_filters(collection_name, request.field_filters)
    raise_for_result(result, "search assets by field filters")

    return AssetListResponse(collection_name=collection_name, assets=result.value, total=len(result.value))
