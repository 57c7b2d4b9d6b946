"""YAML parsing for schema documents.

Schema files are read closer to how a JSON parser would see them: dates are strings,
`1e3` is a number and mapping keys are never turned into booleans or integers.
"""

from __future__ import annotations

import re
from typing import Any, BinaryIO, TextIO

import yaml

try:
    from yaml import CSafeLoader as _SafeLoader
except ImportError:
    from yaml import SafeLoader as _SafeLoader  # type: ignore[assignment]

STR_TAG = "tag:yaml.org,2002:str"
FLOAT_TAG = "tag:yaml.org,2002:float"
TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"

# YAML 1.1 floats need a dot and a signed exponent, JSON numbers need neither
EXPONENT_FLOAT = re.compile(r"^[-+]?[0-9][0-9_]*(?:\.[0-9_]*)?[eE][-+]?[0-9]+$")


class SchemaLoader(_SafeLoader):
    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict[Any, Any]:  # type: ignore[override]
        self.flatten_mapping(node)  # type: ignore[no-untyped-call]
        mapping = {}
        for key_node, value_node in node.value:
            # `on`, `no` or `1` as property names stay strings
            key = self.construct_object(key_node, deep) if key_node.tag == STR_TAG else key_node.value  # type: ignore[no-untyped-call]
            mapping[key] = self.construct_object(value_node, deep)  # type: ignore[no-untyped-call]
        return mapping


SchemaLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != TIMESTAMP_TAG]
    for first, resolvers in _SafeLoader.yaml_implicit_resolvers.items()
}
SchemaLoader.add_implicit_resolver(FLOAT_TAG, EXPONENT_FLOAT, list("-+0123456789"))  # type: ignore[no-untyped-call]


def deserialize_yaml(stream: str | bytes | TextIO | BinaryIO) -> Any:
    return yaml.load(stream, SchemaLoader)
