from boundgen.core.jsonschema.types import JsonSchemaObject, get_type, to_json_type_name

__all__ = ["JsonSchemaObject", "get_type", "to_json_type_name"]
