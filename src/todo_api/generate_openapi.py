"""
Utility script to generate and write the OpenAPI schema for the Todo API.

The schema is built from a freshly created application, so it reflects the same
routes, tags and response envelopes the service serves.

Usage:
    python -m todo_api.generate_openapi

Notes:
- The script ensures every tag in ``openapi_tags`` appears in the schema metadata.
- Default output path is <repository root>/interfaces/openapi.json
"""
from __future__ import annotations

import json
import os
from typing import Any, Dict, List, Optional

from .main import create_app, openapi_tags


def _ensure_tags(schema: Dict[str, Any]) -> None:
    """
    Add any tag from openapi_tags that the generated schema lacks, leaving
    existing tag definitions untouched.
    """
    existing_tags: List[Dict[str, Any]] = schema.get("tags", []) or []
    existing_names = {t.get("name") for t in existing_tags if isinstance(t, dict)}
    for tag in openapi_tags:
        if tag.get("name") not in existing_names:
            existing_tags.append(tag)
    if existing_tags:
        schema["tags"] = existing_tags


def _default_out_path() -> str:
    # src/todo_api/generate_openapi.py -> repository root
    package_dir = os.path.dirname(os.path.abspath(__file__))
    repo_root = os.path.dirname(os.path.dirname(package_dir))
    return os.path.join(repo_root, "interfaces", "openapi.json")


# PUBLIC_INTERFACE
def generate_openapi(out_path: Optional[str] = None) -> str:
    """Write the OpenAPI schema as pretty JSON and return the written file path."""
    schema = create_app().openapi()
    _ensure_tags(schema)

    path = out_path or _default_out_path()
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(schema, f, indent=2, ensure_ascii=False)
    return path


def main() -> None:
    path = generate_openapi()
    print(f"Wrote OpenAPI schema to: {path}")


if __name__ == "__main__":
    main()
