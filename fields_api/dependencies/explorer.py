"""
Explorer Dependency

FastAPI dependencies for the shared explorer context and the query
operations built on it.
"""

from fastapi import Depends, HTTPException, Request

from atomic_offchain import AssetQueries, ExplorerApi, FieldDiscovery
from fields_api.config import explorer_settings


def get_explorer(request: Request) -> ExplorerApi:
    """
    Get the explorer context created by the application lifespan.

    Raises:
        HTTPException: If the explorer context was not initialized
    """
    explorer = getattr(request.app.state, "explorer", None)
    if explorer is None:
        raise HTTPException(status_code=503, detail="Explorer API client not initialized")
    return explorer


def get_field_discovery(explorer: ExplorerApi = Depends(get_explorer)) -> FieldDiscovery:
    return FieldDiscovery(explorer, explorer_settings)


def get_asset_queries(
    explorer: ExplorerApi = Depends(get_explorer),
    discovery: FieldDiscovery = Depends(get_field_discovery),
) -> AssetQueries:
    return AssetQueries(explorer, discovery)
