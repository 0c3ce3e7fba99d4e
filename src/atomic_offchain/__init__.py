"""
AtomicAssets Field Query Library

Discovers which metadata fields the templates and schemas of a collection
carry, and fetches assets by discovered templates or by field filters.
"""

from .assets import AssetQueries
from .config import DEFAULT_FIELDS, ExplorerSettings
from .errors import EmptyResultError, ExplorerError, LookupFailure, MalformedResultError
from .explorer_context import AtomicExplorerContext, ExplorerApi
from .fields import FieldDiscovery, collect_template_ids, merge_schema_fields
from .filters import build_filter_params, build_nation_params
from .result import Result


__all__ = [
    "AssetQueries",
    "AtomicExplorerContext",
    "DEFAULT_FIELDS",
    "EmptyResultError",
    "ExplorerApi",
    "ExplorerError",
    "ExplorerSettings",
    "FieldDiscovery",
    "LookupFailure",
    "MalformedResultError",
    "Result",
    "build_filter_params",
    "build_nation_params",
    "collect_template_ids",
    "merge_schema_fields",
]
