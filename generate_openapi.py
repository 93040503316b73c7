"""Generate an OpenAPI schema file for the FastAPI application."""

from pathlib import Path
import json
import os

from weightlog.main import app


def generate_openapi() -> None:
    """Write the current OpenAPI schema to ``openapi.json``."""
    schema = app.openapi()
    base_url = os.environ.get("PUBLIC_BASE_URL")
    if base_url:
        schema["servers"] = [{"url": base_url.rstrip("/")}]

    # Reads are safe to call without confirmation; writes are not
    for path_item in schema.get("paths", {}).values():
        for method, operation in path_item.items():
            if isinstance(operation, dict):
                operation["x-openai-isConsequential"] = method != "get"
    output_path = Path(__file__).resolve().parent / "openapi.json"
    output_path.write_text(json.dumps(schema, indent=2))


if __name__ == "__main__":
    generate_openapi()
