"""
Field Schemas

Pydantic models for field discovery and asset filter requests and responses.
"""

from typing import Any

from pydantic import BaseModel, Field


class TemplateFieldsResponse(BaseModel):
    """Fields found on each template, grouped by schema"""

    collection_name: str = Field(description="The queried collection")
    fields_checked: list[str] = Field(description="Field names looked up in template immutable data")
    schemas: dict[str, dict[str, list[str]]] = Field(
        description="Schema name -> template id -> fields present on that template"
    )


class SchemaFieldsResponse(BaseModel):
    """Fields found on any template of each schema"""

    collection_name: str = Field(description="The queried collection")
    fields_checked: list[str] = Field(description="Field names looked up in template immutable data")
    schemas: dict[str, list[str]] = Field(description="Schema name -> fields present on its templates")


class FieldFilterRequest(BaseModel):
    """Field value filters for an asset search"""

    field_filters: dict[str, bool | int | float | str] = Field(
        default_factory=dict,
        description="Field name -> expected value. Booleans, numbers and text map to bool, number and text filters",
    )
    nation: str = Field(
        "", description="ISO 3166 alpha-3 nation code (matched upper-cased); empty to skip"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "field_filters": {"year": 2020, "city": "Lima", "verified": True},
                "nation": "per",
            }
        }
    }


class AssetListResponse(BaseModel):
    """Assets returned by the explorer, in explorer order"""

    collection_name: str = Field(description="The queried collection")
    assets: list[dict[str, Any]] = Field(description="Raw asset records from the explorer API")
    total: int = Field(description="Total assets returned")


class FieldErrorResponse(BaseModel):
    """Error response for field and asset operations"""

    detail: str = Field(description="Error message")
