"""
Column type descriptions (TypeSpec) and the elastic mapping nodes they are turned into.

A model's structure() returns untyped values:
- "integer", "string", ... for a plain field
- ("date", "yyyy-MM-dd") for a date field with a format
- {"city": "string", ...} for a nested field
to_type_spec turns these into Scalar, DateLike and Nested once, so the mapping code never has to
guess a variant from the shape of a value.
"""
from typing import Any, Dict, Literal, Mapping, NamedTuple, TypedDict, Union

NESTED: Literal["nested"] = "nested"
LOWERCASE_ANALYZER = "lowercase"


class InvalidArgument(ValueError):
    pass


class Scalar(NamedTuple):
    type: str


class DateLike(NamedTuple):
    type: str
    format: str


class Nested(NamedTuple):
    children: Mapping[str, "TypeSpec"]


TypeSpec = Union[Scalar, DateLike, Nested]


class ElasticField(TypedDict, total=False):
    type: str
    analyzer: str
    format: str


class ElasticNestedField(TypedDict):
    type: Literal["nested"]
    properties: Dict[str, Union["ElasticField", "ElasticNestedField"]]


ElasticMappingProperties = Dict[str, Union[ElasticField, ElasticNestedField]]


def _is_date_pair(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and len(value) == 2 and all(isinstance(v, str) for v in value)


def to_type_spec(value: Any) -> TypeSpec:
    """
    Convert a column value as returned by a model's structure() into a TypeSpec.
    Raises InvalidArgument if the value is not one of the known forms.
    """
    if isinstance(value, (Scalar, DateLike, Nested)):
        return value
    if isinstance(value, str):
        return Scalar(value)
    # (type, format) pairs need to be checked before mappings: both are containers
    if _is_date_pair(value):
        return DateLike(value[0], value[1])
    if isinstance(value, Mapping):
        return Nested(to_columns(value))
    raise InvalidArgument(f"Cannot interpret column type {value!r}")


def to_columns(structure: Mapping[str, Any]) -> dict[str, TypeSpec]:
    return {field: to_type_spec(value) for field, value in structure.items()}
