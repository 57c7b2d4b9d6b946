import pytest

from boundgen import ABSENT, BooleanSchema, ObjectSchema, StringSchema, UnknownType, generate_data

NON_OBJECTS = [ABSENT, None, 42, "a", True]


def test_required_and_optional():
    schema = {
        "type": "object",
        "properties": {"a": {"type": "boolean"}, "b": {"type": "string"}},
        "required": ["a"],
    }
    data = generate_data(schema)
    assert data.valid == [
        # Minimal valid object and its variations
        {"a": True},
        {"a": False},
        # All properties set
        {"a": True, "b": ""},
        {"a": False, "b": ""},
        {"a": True, "b": "a"},
    ]
    assert data.invalid == [
        {},
        {"a": ABSENT, "b": ""},
        {"a": None, "b": ""},
        {"a": 42, "b": ""},
        {"a": "a", "b": ""},
        {"a": {}, "b": ""},
        # Missing `b` is fine
        {"a": True, "b": None},
        {"a": True, "b": 42},
        {"a": True, "b": True},
        {"a": True, "b": {}},
        *NON_OBJECTS,
    ]


def test_typed_schema_matches_raw():
    raw = {
        "type": "object",
        "properties": {"a": {"type": "boolean"}, "b": {"type": "string"}},
        "required": ["a"],
    }
    typed = ObjectSchema(properties={"a": BooleanSchema(), "b": StringSchema()}, required=("a",))
    assert generate_data(typed) == generate_data(raw)


def test_no_properties():
    data = generate_data({"type": "object"})
    # Both the minimal and the canonical objects are empty
    assert data.valid == [{}, {}]
    assert data.invalid == NON_OBJECTS


def test_all_optional():
    data = generate_data({"type": "object", "properties": {"flag": {"type": "boolean"}}})
    assert data.valid == [{}, {"flag": True}, {"flag": False}]
    # An empty object is valid, so it is not among invalid values
    assert {} not in data.invalid
    assert data.invalid == [{"flag": None}, {"flag": 42}, {"flag": "a"}, {"flag": {}}, *NON_OBJECTS]


def test_all_required():
    data = generate_data(
        {
            "type": "object",
            "properties": {"x": {"type": "number", "minimum": 0, "maximum": 1}},
            "required": ["x"],
        }
    )
    assert data.valid == [{"x": 0}, {"x": 1}, {"x": 0}, {"x": 1}]
    assert data.invalid[0] == {}
    assert {"x": ABSENT} in data.invalid
    assert {"x": 2} in data.invalid
    assert data.invalid[-5:] == NON_OBJECTS


def test_required_without_declaration_is_ignored(oracle):
    schema = {"type": "object", "properties": {"a": {"type": "boolean"}}, "required": ["b"]}
    data = generate_data(schema)
    assert data.valid == [{}, {"a": True}, {"a": False}]
    # `b` has no schema to draw a value from, so none of these objects have it
    assert not any(oracle.is_valid(value, schema) for value in data.valid)


def test_each_required_property_can_be_absent():
    schema = {
        "type": "object",
        "properties": {
            "id": {"type": "number"},
            "name": {"type": "string", "minLength": 1},
            "tags": {"type": "array", "items": {"type": "string"}},
        },
        "required": ["id", "name"],
    }
    data = generate_data(schema)
    absent = [name for value in data.invalid if isinstance(value, dict) for name, v in value.items() if v is ABSENT]
    assert absent == ["id", "name"]


def test_nested_objects(oracle):
    schema = {
        "type": "object",
        "properties": {
            "user": {
                "type": "object",
                "properties": {
                    "name": {"type": "string", "minLength": 2, "maxLength": 4},
                    "admin": {"type": "boolean"},
                },
                "required": ["name"],
            },
            "score": {"type": "number", "minimum": 0, "maximum": 10},
        },
        "required": ["user"],
    }
    data = generate_data(schema)
    assert data.canonical == {"user": {"name": "aa"}}
    assert {"user": {"name": "aa"}, "score": 0} in data.valid
    assert {"user": {"name": "aa", "admin": True}} in data.valid
    # Nested required property is missing
    assert {"user": {}, "score": 0} in data.invalid
    oracle.check(data, schema)


def test_witnesses_do_not_share_state():
    data = generate_data(
        {
            "type": "object",
            "properties": {"inner": {"type": "object", "properties": {"v": {"type": "boolean"}}}},
            "required": ["inner"],
        }
    )
    data.valid[0]["inner"]["v"] = "changed"
    assert all(value.get("inner", {}).get("v") != "changed" for value in data.valid[1:])


def test_unknown_nested_type():
    schema = {
        "type": "object",
        "properties": {"a": {"type": "object", "properties": {"b": {"type": "integer"}}}},
    }
    with pytest.raises(UnknownType) as exc:
        generate_data(schema)
    assert exc.value.type == "integer"
    assert exc.value.path == ["properties", "a", "properties", "b"]
    assert str(exc.value) == "Unknown type: `integer` at properties.a.properties.b"


@pytest.mark.parametrize(
    "schema",
    [
        {"type": "object"},
        {"type": "object", "properties": {"a": {"type": "number", "minimum": 1}}},
        {
            "type": "object",
            "properties": {"a": {"type": "number"}, "b": {"type": "boolean"}, "c": {"type": "string"}},
            "required": ["a", "c"],
            "additionalProperties": False,
        },
        {
            "type": "object",
            "properties": {"list": {"type": "array", "items": {"type": "number"}, "maxItems": 2}},
            "required": ["list"],
        },
    ],
)
def test_objects_conform(oracle, schema):
    oracle.check(generate_data(schema), schema)
