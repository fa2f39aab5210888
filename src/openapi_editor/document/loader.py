"""Reading and writing OpenAPI documents as YAML or JSON."""

import json
from pathlib import Path

import yaml

YAML_SUFFIXES = (".yaml", ".yml")


class DocumentLoadError(ValueError):
    """The file is not a readable OpenAPI/Swagger document."""


class _NoAliasDumper(yaml.SafeDumper):
    """Writes shared objects out in full instead of as anchors/aliases."""

    def ignore_aliases(self, data):
        return True


def _read_text(file_path: Path) -> str:
    try:
        return file_path.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as e:
        raise DocumentLoadError(f"Cannot read {file_path}: {e}") from e


def detect_format(file_path: Path) -> str:
    """Detect the serialization format of a document file.

    Returns: 'yaml' or 'json'.
    """
    suffix = file_path.suffix.lower()
    if suffix == ".json":
        return "json"
    if suffix in YAML_SUFFIXES:
        return "yaml"

    text = _read_text(file_path)
    try:
        json.loads(text)
        return "json"
    except (json.JSONDecodeError, ValueError):
        return "yaml"


def load_document(file_path: Path) -> tuple[dict, str]:
    """Load an OpenAPI document, returning (document, format)."""
    fmt = detect_format(file_path)
    text = _read_text(file_path)

    try:
        doc = json.loads(text) if fmt == "json" else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DocumentLoadError(f"Cannot parse {file_path} as {fmt.upper()}: {e}") from e

    if not isinstance(doc, dict) or not ("openapi" in doc or "swagger" in doc):
        raise DocumentLoadError(f"{file_path} is not an OpenAPI or Swagger document")
    return doc, fmt


def dump_document(document: dict, fmt: str) -> str:
    """Serialize a document as 'yaml' or 'json', keeping key order."""
    if fmt == "json":
        return json.dumps(document, indent=2, ensure_ascii=False, default=str) + "\n"
    return yaml.dump(
        document,
        Dumper=_NoAliasDumper,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        width=float("inf"),
    )
