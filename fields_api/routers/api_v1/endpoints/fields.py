"""
Field Endpoints

FastAPI endpoints reporting which metadata fields the templates and schemas
of an AtomicAssets collection carry.
"""

from fastapi import APIRouter, Depends, Path, Query

from atomic_offchain import FieldDiscovery
from fields_api.dependencies.explorer import get_field_discovery
from fields_api.schemas.fields import FieldErrorResponse, SchemaFieldsResponse, TemplateFieldsResponse
from fields_api.utils.errors import raise_for_result


router = APIRouter()

ERROR_RESPONSES = {
    401: {"model": FieldErrorResponse, "description": "Invalid or missing API key"},
    404: {"model": FieldErrorResponse, "description": "Collection has no schemas"},
    502: {"model": FieldErrorResponse, "description": "Explorer API error"},
}


@router.get(
    "/{collection_name}/templates",
    response_model=TemplateFieldsResponse,
    summary="List template fields",
    description="Get the requested fields found on each template of a collection, grouped by schema.",
    responses=ERROR_RESPONSES,
)
async def list_template_fields(
    collection_name: str = Path(..., min_length=1, description="Collection name"),
    fields: list[str] | None = Query(None, description="Fields to look for (default: configured field list)"),
    discovery: FieldDiscovery = Depends(get_field_discovery),
) -> TemplateFieldsResponse:
    """
    Scan every template of a collection for the requested fields.

    Templates without any requested field are omitted, as are schemas
    without a matching template.
    """
    fields_checked = discovery.resolve_fields(fields)
    result = await discovery.scan_templates(collection_name, fields_checked)
    raise_for_result(result, "scan collection templates")

    return TemplateFieldsResponse(
        collection_name=collection_name,
        fields_checked=fields_checked,
        schemas=result.value,
    )


@router.get(
    "/{collection_name}/schemas",
    response_model=SchemaFieldsResponse,
    summary="List schema fields",
    description="Get the requested fields found on any template of each schema of a collection.",
    responses=ERROR_RESPONSES,
)
async def list_schema_fields(
    collection_name: str = Path(..., min_length=1, description="Collection name"),
    fields: list[str] | None = Query(None, description="Fields to look for (default: configured field list)"),
    discovery: FieldDiscovery = Depends(get_field_discovery),
) -> SchemaFieldsResponse:
    fields_checked = discovery.resolve_fields(fields)
    result = await discovery.aggregate_schemas(collection_name, fields_checked)
    raise_for_result(result, "aggregate schema fields")

    return SchemaFieldsResponse(
        collection_name=collection_name,
        fields_checked=fields_checked,
        schemas=result.value,
    )
