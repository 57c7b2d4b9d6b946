from pathlib import Path

import jsonschema.validators

from boundgen.core import json

CONFIG_SCHEMA = json.loads((Path(__file__).parent / "schema.json").read_text(encoding="utf-8"))

CONFIG_VALIDATOR = jsonschema.validators.Draft202012Validator(CONFIG_SCHEMA)
