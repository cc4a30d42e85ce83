"""Generate a JSON Schema for the loadassert YAML config."""

from __future__ import annotations

import json
from pathlib import Path

from loadassert.config import AssertConfig

SCHEMA_ID = "https://loadassert.dev/schemas/loadassert.schema.json"


def generate_json_schema() -> dict:
    schema = AssertConfig.model_json_schema()
    schema["$id"] = SCHEMA_ID
    # colors has a factory default that depends on NO_COLOR at load time
    schema["properties"]["colors"].pop("default", None)
    return schema


def write_json_schema(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(generate_json_schema(), indent=2) + "\n")
