import platform
from json import JSONDecodeError as JSONDecodeError

if platform.python_implementation() == "PyPy":
    import json as _json

    loads = _json.loads

    def dumps(obj: object, *, indent: bool = False) -> str:
        # Match orjson output: two-space indent and no escaping of non-ASCII text
        return _json.dumps(obj, indent=2 if indent else None, ensure_ascii=False)
else:
    import orjson

    loads = orjson.loads

    def dumps(obj: object, *, indent: bool = False) -> str:
        return orjson.dumps(obj, option=orjson.OPT_INDENT_2 if indent else None).decode("utf-8")
