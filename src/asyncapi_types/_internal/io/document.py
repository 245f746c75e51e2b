"""Document text I/O: JSON and YAML to and from structured-value trees."""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Tuple, Union

import yaml

from asyncapi_types.codes import ValidationCode
from asyncapi_types.errors import DocumentParseError

logger = logging.getLogger(__name__)

JSON = "json"
YAML = "yaml"
FORMATS = (JSON, YAML)

_SUFFIXES = {
    ".json": JSON,
    ".yaml": YAML,
    ".yml": YAML,
}


class _DocumentLoader(yaml.SafeLoader):
    """SafeLoader that leaves dates and timestamps as strings, as JSON would."""


_DocumentLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:timestamp"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def format_for_path(path: Path) -> Optional[str]:
    """Format implied by a file suffix, or None when the suffix says nothing."""
    return _SUFFIXES.get(path.suffix.lower())


def sniff_format(text: str) -> str:
    """JSON documents start with `{`; everything else is read as YAML."""
    return JSON if text.lstrip().startswith("{") else YAML


def loads(text: Union[str, bytes], format: Optional[str] = None) -> Any:
    """Decode document text into a structured-value tree.

    Raises:
        DocumentParseError: On malformed JSON or YAML (code INVALID_SYNTAX)
    """
    if isinstance(text, bytes):
        text = text.decode("utf-8")
    if format is None:
        format = sniff_format(text)
    if format not in FORMATS:
        raise ValueError(f"Unsupported document format: {format!r} (expected one of {FORMATS})")

    try:
        if format == JSON:
            return json.loads(text)
        return yaml.load(text, Loader=_DocumentLoader)
    except json.JSONDecodeError as e:
        raise DocumentParseError(
            f"Invalid JSON at line {e.lineno} column {e.colno}: {e.msg}",
            code=ValidationCode.INVALID_SYNTAX,
        ) from e
    except yaml.YAMLError as e:
        raise DocumentParseError(f"Invalid YAML: {e}", code=ValidationCode.INVALID_SYNTAX) from e


def dumps(data: Any, format: str = JSON, indent: int = 2) -> str:
    """Encode a structured-value tree; key order is kept as given."""
    if format == JSON:
        return json.dumps(data, indent=indent, ensure_ascii=False) + "\n"
    if format == YAML:
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, indent=indent)
    raise ValueError(f"Unsupported document format: {format!r} (expected one of {FORMATS})")


def read_document(path: Union[str, Path]) -> Tuple[Any, str]:
    """Read and decode a document file.

    Returns:
        (structured-value tree, format used)
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    format = format_for_path(path) or sniff_format(text)
    logger.debug("Reading %s as %s", path, format)
    return loads(text, format), format


def write_document(data: Any, path: Union[str, Path], format: Optional[str] = None, indent: int = 2) -> str:
    """Encode and write a document file; returns the format used."""
    path = Path(path)
    if format is None:
        format = format_for_path(path) or JSON
    path.write_text(dumps(data, format, indent), encoding="utf-8")
    logger.debug("Wrote %s as %s", path, format)
    return format
