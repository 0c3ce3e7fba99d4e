"""
Field Discovery

Scans the templates of a collection for metadata fields and aggregates the
fields found per schema.
"""

import logging
from typing import Sequence

from .config import ExplorerSettings
from .errors import EmptyResultError, ExplorerError, LookupFailure
from .explorer_context import ExplorerApi
from .result import Result


logger = logging.getLogger(__name__)

# schema name -> template id -> fields found on that template
TemplateFieldMap = dict[str, dict[str, list[str]]]
# schema name -> fields found on any template of that schema
SchemaFieldMap = dict[str, list[str]]


def find_template_fields(immutable_data: dict | None, fields_to_check: Sequence[str]) -> list[str]:
    """Return the requested fields present in a template's immutable data, in request order"""
    keys = immutable_data or {}
    return [field for field in fields_to_check if field in keys]


def merge_schema_fields(template_fields: TemplateFieldMap) -> SchemaFieldMap:
    """
    Reduce per-template field lists to one deduplicated list per schema

    Fields keep the order in which they were first seen across the schema's
    templates.
    """
    schema_fields: SchemaFieldMap = {}
    for schema_name, templates in template_fields.items():
        seen: dict[str, None] = {}
        for fields in templates.values():
            for field in fields:
                seen.setdefault(field, None)
        schema_fields[schema_name] = list(seen)
    return schema_fields


def collect_template_ids(template_fields: TemplateFieldMap) -> list[str]:
    """
    Flatten the template ids of every schema into one list

    Ids are deduplicated in first-discovery order. An id reported under more
    than one schema is logged and kept once.
    """
    owners: dict[str, str] = {}
    for schema_name, templates in template_fields.items():
        for template_id in templates:
            if template_id in owners:
                logger.warning(
                    f"Template {template_id} appears in schemas '{owners[template_id]}' and '{schema_name}'"
                )
                continue
            owners[template_id] = schema_name
    return list(owners)


class FieldDiscovery:
    """Discovers which metadata fields the templates and schemas of a collection carry"""

    def __init__(self, explorer: ExplorerApi, settings: ExplorerSettings | None = None):
        """
        Initialize field discovery

        Args:
            explorer: Explorer API used for schema and template listings
            settings: Explorer settings providing the default field list
        """
        self.explorer = explorer
        self.settings = settings or ExplorerSettings()

    def resolve_fields(self, fields_to_check: Sequence[str] | None) -> list[str]:
        """Use the configured default fields when none are given"""
        if fields_to_check is None:
            return list(self.settings.default_fields)
        return list(fields_to_check)

    async def scan_templates(
        self, collection_name: str, fields_to_check: Sequence[str] | None = None
    ) -> Result[TemplateFieldMap]:
        """
        Find the requested fields on every template of a collection

        Args:
            collection_name: Collection to scan
            fields_to_check: Field names to look for (default: configured fields)

        Returns:
            Result holding ``{schema_name: {template_id: [fields]}}``. Templates
            with no requested field are left out, and so are schemas without
            any matching template. Fails with EmptyResultError when the
            collection has no schemas, or LookupFailure when a listing fails.
        """
        if not collection_name:
            return Result.failure(ExplorerError("collection_name is required"))

        fields = self.resolve_fields(fields_to_check)
        logger.info(f"Scanning templates of collection '{collection_name}' for fields {fields}")

        try:
            schemas = await self.explorer.get_schemas(collection_name)
            if not schemas:
                raise EmptyResultError(f"Schemas not found for collection '{collection_name}'")

            template_fields: TemplateFieldMap = {}
            for schema in schemas:
                schema_name = schema["schema_name"]
                templates = await self.explorer.get_templates(schema_name, collection_name=collection_name)

                for template in templates:
                    found = find_template_fields(template.get("immutable_data"), fields)
                    if not found:
                        continue

                    template_id = str(template["template_id"])
                    logger.debug(f"Template {template_id} in schema '{schema_name}' has fields {found}")
                    template_fields.setdefault(schema_name, {})[template_id] = found

            return Result.success(template_fields)

        except ExplorerError as e:
            logger.error(f"Error checking collection schemas for '{collection_name}': {str(e)}")
            return Result.failure(e)
        except Exception as e:
            logger.error(f"Unexpected error scanning collection '{collection_name}': {str(e)}")
            return Result.failure(LookupFailure(f"Failed to scan collection '{collection_name}': {str(e)}"))

    async def aggregate_schemas(
        self, collection_name: str, fields_to_check: Sequence[str] | None = None
    ) -> Result[SchemaFieldMap]:
        """
        Find the requested fields present on any template of each schema

        Returns:
            Result holding ``{schema_name: [fields]}``. Every schema listed has
            at least one field; failures of the template scan are passed on.
        """
        logger.info(f"Getting schemas with fields for collection '{collection_name}'")

        scanned = await self.scan_templates(collection_name, fields_to_check)
        if not scanned.ok:
            logger.error(f"Error retrieving schemas with aggregated fields: {str(scanned.error)}")
            return Result.failure(scanned.error)

        schema_fields = merge_schema_fields(scanned.value)
        logger.info(f"Aggregated schema fields: {schema_fields}")
        return Result.success(schema_fields)
