"""
Filter schemas: the list of fields a search UI can filter on, read from the live elastic mapping
"""
import logging
from typing import Any, Mapping

from elasticsearch import Elasticsearch

from modelindex.elastic_mapping import NESTED


def flatten_properties(properties: Mapping[str, Any], prefix: str = "") -> list[str]:
    """
    List the dotted paths of all leaf fields in the mapping properties, depth first and in mapping order.
    Only fields with type "nested" are descended into; the nested fields themselves are not listed.
    Fields without a type (object fields in elastic mapping responses) are skipped.
    """
    result = []
    for key, node in properties.items():
        if "type" not in node:
            continue
        if node["type"] == NESTED:
            result.extend(flatten_properties(node.get("properties", {}), f"{prefix}{key}."))
        else:
            result.append(f"{prefix}{key}")
    return result


def _mapping_properties(mappings: Mapping[str, Any]) -> Mapping[str, Any] | None:
    """Get the properties from either a typeless mapping or a mapping keyed by type name"""
    if "properties" in mappings:
        return mappings["properties"]
    type_mapping = next(iter(mappings.values()), None)
    return type_mapping.get("properties") if isinstance(type_mapping, Mapping) else None


def get_schema(client: Elasticsearch, index: str) -> list[str]:
    """
    Get the filterable fields of an index as dotted field paths.
    Returns an empty list if the index has no mapping (yet).
    """
    response = client.indices.get_mapping(index=index)
    index_mapping = next((response[name] for name in response.keys()), None)
    if not index_mapping or "mappings" not in index_mapping:
        logging.debug(f"No mappings found for index {index}")
        return []
    properties = _mapping_properties(index_mapping["mappings"])
    if not properties:
        return []
    # Reverse order is what the filter UI has been getting so far, it is not clear it relies on it
    return sorted(flatten_properties(properties), reverse=True)
