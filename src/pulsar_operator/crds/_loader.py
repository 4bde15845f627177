# pyright: reportAny=false, reportExplicitAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""Spec document loading.

Documents may be YAML, JSON or TOML, and may hold either a bare ``global``
section or a complete PulsarCluster resource.
"""

import tomllib
from pathlib import Path
from typing import Any

import orjson
import yaml
from pydantic import ValidationError

from pulsar_operator.crds._global import GlobalSpec
from pulsar_operator.crds._validation import (
    issues_from_validation_error,
    raise_if_validation_errors,
)
from pulsar_operator.exceptions import SpecLoadError

YAML_SUFFIXES = frozenset({".yaml", ".yml"})
JSON_SUFFIXES = frozenset({".json"})
TOML_SUFFIXES = frozenset({".toml"})


def _parse_yaml(path: Path, text: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.MarkedYAMLError as e:
        mark = e.problem_mark
        msg = f"Failed to parse YAML file: {e}"
        raise SpecLoadError(
            msg,
            path=path,
            line=mark.line + 1 if mark is not None else None,
            column=mark.column + 1 if mark is not None else None,
        ) from e
    except yaml.YAMLError as e:
        msg = f"Failed to parse YAML file: {e}"
        raise SpecLoadError(msg, path=path) from e


def _parse_json(path: Path, text: str) -> Any:
    try:
        return orjson.loads(text)
    except orjson.JSONDecodeError as e:
        msg = f"Failed to parse JSON file: {e}"
        raise SpecLoadError(msg, path=path, line=e.lineno, column=e.colno) from e


def _parse_toml(path: Path, text: str) -> Any:
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        msg = f"Failed to parse TOML file: {e}"
        raise SpecLoadError(
            msg,
            path=path,
            line=getattr(e, "lineno", None),
            column=getattr(e, "colno", None),
        ) from e


def read_spec_file(path: Path) -> dict[str, Any]:
    """Read and parse a spec document.

    The format is chosen from the file suffix; unknown suffixes are read as
    YAML, which also accepts JSON.

    Args:
        path: Path to the document.

    Returns:
        Parsed document as a dictionary. An empty document yields ``{}``.

    Raises:
        FileNotFoundError: If the file does not exist.
        SpecLoadError: If the file cannot be parsed or its root is not a
            mapping.
    """
    text = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()

    if suffix in JSON_SUFFIXES:
        data = _parse_json(path, text)
    elif suffix in TOML_SUFFIXES:
        data = _parse_toml(path, text)
    else:
        data = _parse_yaml(path, text)

    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Spec document root must be a mapping, got {type(data).__name__}"
        raise SpecLoadError(msg, path=path)
    return data


def extract_global_section(document: dict[str, Any]) -> dict[str, Any]:
    """Return the global section of a spec document.

    A PulsarCluster resource (a document with a ``spec`` mapping) yields its
    ``spec.global`` section; any other document is taken to be the global
    section itself.

    Args:
        document: Parsed spec document.

    Returns:
        The global section, ``{}`` when it is missing or null.

    Raises:
        SpecLoadError: If the section is present but not a mapping.
    """
    section: Any = document
    spec = document.get("spec")
    if isinstance(spec, dict):
        section = spec.get("global")

    if section is None:
        return {}
    if not isinstance(section, dict):
        msg = f"Global section must be a mapping, got {type(section).__name__}"
        raise SpecLoadError(msg)
    return section


def global_spec_from_dict(
    data: dict[str, Any],
    *,
    source: str | None = None,
) -> GlobalSpec:
    """Build a GlobalSpec from a global section.

    Args:
        data: Global section with camelCase (or snake_case) keys.
        source: Document name used in validation errors.

    Returns:
        The parsed spec, with no defaults applied.

    Raises:
        SpecValidationError: If the section does not match the schema.
    """
    try:
        return GlobalSpec.model_validate(data)
    except ValidationError as e:
        issues = issues_from_validation_error(e, source=source)
        raise_if_validation_errors(issues, source=source)
        raise


def load_global_spec(path: Path) -> GlobalSpec:
    """Load the global section of a spec document.

    Args:
        path: Path to a YAML, JSON or TOML document.

    Returns:
        The parsed spec, with no defaults applied.

    Raises:
        FileNotFoundError: If the file does not exist.
        SpecLoadError: If the file cannot be parsed.
        SpecValidationError: If the global section does not match the schema.
    """
    document = read_spec_file(path)
    try:
        section = extract_global_section(document)
    except SpecLoadError as e:
        raise SpecLoadError(str(e), path=path) from e
    return global_spec_from_dict(section, source=str(path))


def dump_global_spec(spec: GlobalSpec) -> dict[str, Any]:
    """Dump a spec as a JSON-compatible mapping with camelCase keys.

    Absent fields are omitted.
    """
    return spec.to_document()


def get_global_spec_schema() -> dict[str, Any]:
    """Get the JSON Schema of the global section, using wire names."""
    return GlobalSpec.model_json_schema(by_alias=True)
