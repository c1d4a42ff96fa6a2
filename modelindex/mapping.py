"""
Build the elastic index settings and mapping for a model's columns
"""
from typing import Any, Mapping

from modelindex.elastic_mapping import (
    LOWERCASE_ANALYZER,
    NESTED,
    DateLike,
    ElasticMappingProperties,
    Nested,
    Scalar,
    to_type_spec,
)


def build_properties(columns: Mapping[str, Any]) -> ElasticMappingProperties:
    """
    Turn a {field: TypeSpec} mapping into elastic mapping properties, keeping the field order.
    Nested columns are mapped recursively as {"type": "nested", "properties": {...}}.
    Untyped structure values are accepted as well and converted with to_type_spec.
    """
    properties: ElasticMappingProperties = {}
    for field, value in columns.items():
        spec = to_type_spec(value)
        match spec:
            case DateLike(type=type_, format=format_):
                properties[field] = {"type": type_, "format": format_}
            case Scalar(type=type_):
                properties[field] = {"type": type_}
                if type_ == "string":
                    properties[field]["analyzer"] = LOWERCASE_ANALYZER
            case Nested(children=children):
                properties[field] = {"type": NESTED, "properties": build_properties(children)}
    return properties


def index_settings(
    nested_limit: int = 75, max_result_window: int = 50000, max_clause_count: int | None = 1000000
) -> dict:
    settings: dict[str, Any] = {
        "index.mapping.nested_fields.limit": nested_limit,
        "max_result_window": max_result_window,
    }
    if max_clause_count is not None:
        settings["index.query.bool.max_clause_count"] = max_clause_count
    settings["analysis"] = {
        "analyzer": {
            LOWERCASE_ANALYZER: {
                "type": "custom",
                "tokenizer": "keyword",
                "filter": ["lowercase"],
            },
        },
    }
    return settings


def index_body(
    index_name: str,
    columns: Mapping[str, Any],
    nested_limit: int = 75,
    max_result_window: int = 50000,
    max_clause_count: int | None = 1000000,
    mapping_types: bool = True,
) -> dict:
    """
    The full body for creating the index: settings plus the mapping of all columns.
    With mapping_types the mapping is keyed by the type name (which is the index name).
    """
    mapping = {"properties": build_properties(columns)}
    return {
        "settings": index_settings(nested_limit, max_result_window, max_clause_count),
        "mappings": {index_name: mapping} if mapping_types else mapping,
    }
