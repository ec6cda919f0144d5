"""
Swagger 2 parser that builds an AST.

First phase of the pipeline: turn the already deserialized document
into nodes, without resolving references.
"""

from __future__ import annotations

from typing import Any

from .nodes import (
    ArrayNode,
    ObjectNode,
    PrimitiveNode,
    RefNode,
    SchemaDocument,
    SchemaNode,
    UnionNode,
)


class SchemaParser:
    """Parses a Swagger 2 document into an AST."""

    def parse(self, schema: dict[str, Any]) -> SchemaDocument:
        """
        Parse a Swagger 2 document.

        Args:
            schema: The deserialized document; only "definitions" is read

        Returns:
            SchemaDocument keyed by the raw (unsanitized) definition names
        """
        document = SchemaDocument(raw_schema=schema)
        definitions = schema.get("definitions") or {}
        for name, definition in definitions.items():
            if not isinstance(definition, dict):
                continue
            document.definitions[name] = self.parse_node(definition, f"#/definitions/{name}")
        return document

    def parse_node(self, schema: dict[str, Any], path: str = "#") -> SchemaNode:
        """
        Parse a schema node recursively.

        Args:
            schema: The schema dictionary
            path: Current path in the document (for error messages)

        Returns:
            Appropriate SchemaNode subclass
        """
        common = {
            "description": schema.get("description") if isinstance(schema.get("description"), str) else None,
            "enum": list(schema["enum"]) if isinstance(schema.get("enum"), list) else None,
            "type_name": schema.get("type") if isinstance(schema.get("type"), str) else None,
            "source_path": path,
            **self._parse_object_fields(schema, path),
        }

        if "$ref" in schema:
            return RefNode(ref_path=schema["$ref"], **common)

        if isinstance(schema.get("items"), dict):
            return ArrayNode(items=self.parse_node(schema["items"], f"{path}/items"), **common)

        if isinstance(schema.get("oneOf"), list):
            variants = [self.parse_node(variant, f"{path}/oneOf/{i}") for i, variant in enumerate(schema["oneOf"])]
            return UnionNode(variants=variants, **common)

        if any(key in schema for key in ("properties", "allOf", "additionalProperties")):
            return ObjectNode(**common)

        return PrimitiveNode(**common)

    def _parse_object_fields(self, schema: dict[str, Any], path: str) -> dict[str, Any]:
        """Parse properties, allOf, additionalProperties and required, whatever the node's shape."""
        properties = None
        if isinstance(schema.get("properties"), dict):
            properties = {
                key: self.parse_node(value, f"{path}/properties/{key}")
                for key, value in schema["properties"].items()
            }

        all_of = []
        if isinstance(schema.get("allOf"), list):
            all_of = [self.parse_node(item, f"{path}/allOf/{i}") for i, item in enumerate(schema["allOf"])]

        additional = schema.get("additionalProperties")
        if isinstance(additional, dict):
            additional = self.parse_node(additional, f"{path}/additionalProperties")
        elif not isinstance(additional, bool):
            additional = None

        required = schema.get("required")

        return {
            "properties": properties,
            "required": list(required) if isinstance(required, list) else [],
            "all_of": all_of,
            "additional_properties": additional,
        }
