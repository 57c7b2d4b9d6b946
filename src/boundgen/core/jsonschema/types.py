from typing import Any

from boundgen.core import ABSENT

JsonSchemaObject = dict[str, Any]

# Order matters: `bool` is a subclass of `int`
_JSON_TYPES: tuple[tuple[type | tuple[type, ...], str], ...] = (
    (bool, "boolean"),
    ((int, float), "number"),
    (str, "string"),
    (list, "array"),
    (dict, "object"),
)


def get_type(schema: JsonSchemaObject) -> Any:
    """The raw `type` tag. Lists of types or a missing tag are returned as they are."""
    return schema.get("type")


def to_json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if value is ABSENT:
        return "absent"
    for types, name in _JSON_TYPES:
        if isinstance(value, types):
            return name
    return type(value).__name__
