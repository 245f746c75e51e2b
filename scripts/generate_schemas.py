"""Generate JSON schemas from Pydantic models and save to schemas/ directory."""

import json
from pathlib import Path

from asyncapi_types.model import AsyncAPI, Channel, Message, Operation, Schema


def generate_schemas():
    """Generate JSON schemas for the document root and the main entities."""
    schemas_dir = Path(__file__).parent.parent / "schemas"
    schemas_dir.mkdir(exist_ok=True)

    models = {
        "asyncapi": AsyncAPI,
        "channel": Channel,
        "operation": Operation,
        "message": Message,
        "schema": Schema,
    }
    for name, model in models.items():
        schema = model.model_json_schema(by_alias=True)
        schema_path = schemas_dir / f"{name}.schema.json"
        with open(schema_path, 'w', encoding='utf-8') as f:
            json.dump(schema, f, indent=2, ensure_ascii=False)
        print(f"Generated: {schema_path}")

    print("\nSchema generation complete!")


if __name__ == "__main__":
    generate_schemas()
