"""Public API for asyncapi_types.

High-level functions that load, dump, round-trip check and validate
AsyncAPI documents. Clients should use these instead of importing from
_internal.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from asyncapi_types._internal.canonical_json import compute_document_hash
from asyncapi_types._internal.io import document as document_io
from asyncapi_types.codes import ValidationCode
from asyncapi_types.errors import DocumentParseError
from asyncapi_types.kernel.pointer import child_pointer
from asyncapi_types.kernel.resolver import ReferenceResolver
from asyncapi_types.kernel.variant_or import VariantOrUnknown, VariantOrUnknownOrEmpty
from asyncapi_types.kernel.walk import iter_nodes
from asyncapi_types.model.document import SUPPORTED_MAJOR_VERSIONS, AsyncAPI

logger = logging.getLogger(__name__)

Source = Union[str, os.PathLike, Path, Dict[str, Any], AsyncAPI]

EXTENSION_PREFIX = "x-"


class ValidationIssue(BaseModel):
    """A single validation issue (error or warning)."""
    code: str  # e.g. "INVALID_STRUCTURE", "UNRESOLVED_REFERENCE", "UNKNOWN_VARIANT"
    message: str
    location: Optional[str] = None  # Pointer to the offending node, e.g. "#/channels/userSignup"
    pointer: Optional[str] = None  # For reference issues: the $ref target


class ValidationResult(BaseModel):
    """Result of validation."""
    ok: bool  # True if no errors (warnings don't block)
    errors: List[ValidationIssue]  # Blocking issues
    warnings: List[ValidationIssue]  # Non-blocking issues


class RoundTripResult(BaseModel):
    """Result of decoding a document and encoding it back."""
    ok: bool
    input_hash: str  # sha256 of the canonical input tree
    output_hash: str  # sha256 of the canonical re-encoded tree
    differences: List[str] = Field(default_factory=list)  # Pointers whose values differ


def _normalize_path(path: Union[str, os.PathLike, Path]) -> Path:
    """Normalize path input to Path object."""
    return Path(path) if not isinstance(path, Path) else path


def _decode(data: Any, what: str = "document") -> AsyncAPI:
    if not isinstance(data, dict):
        raise DocumentParseError(
            f"Invalid {what} structure at #: expected a mapping, got {type(data).__name__}"
        )
    try:
        return AsyncAPI.model_validate(data)
    except ValidationError as e:
        raise DocumentParseError.from_validation_error(e, what) from e


def _load_raw(source: Source) -> Any:
    """Structured-value tree for any accepted source."""
    if isinstance(source, AsyncAPI):
        return source.to_document()
    if isinstance(source, dict):
        return source
    data, _ = document_io.read_document(_normalize_path(source))
    return data


def load_document(source: Source) -> AsyncAPI:
    """Load an AsyncAPI document from a file path or an already decoded dict.

    Files ending in .json are read as JSON, .yaml/.yml as YAML; anything
    else is sniffed.

    Raises:
        DocumentParseError: If the text is malformed or the tree is not a
            valid AsyncAPI document
        FileNotFoundError: If the path does not exist
    """
    if isinstance(source, AsyncAPI):
        return source
    document = _decode(_load_raw(source))
    logger.debug("Loaded AsyncAPI %s document '%s'", document.asyncapi, document.info.title)
    return document


def parse_document(text: Union[str, bytes], format: Optional[str] = None) -> AsyncAPI:
    """Decode an AsyncAPI document from JSON or YAML text (sniffed when format is None)."""
    return _decode(document_io.loads(text, format))


def dump_document(document: BaseModel, format: str = document_io.JSON, indent: int = 2) -> str:
    """Encode any model (normally an AsyncAPI root) to JSON or YAML text."""
    return document_io.dumps(_to_tree(document), format, indent)


def write_document(
    document: BaseModel,
    path: Union[str, os.PathLike, Path],
    format: Optional[str] = None,
    indent: int = 2,
) -> Path:
    """Write a model to a file; the format follows the suffix unless given."""
    path = _normalize_path(path)
    document_io.write_document(_to_tree(document), path, format, indent)
    return path


def _to_tree(document: BaseModel) -> Any:
    if hasattr(document, "to_document"):
        return document.to_document()
    return document.model_dump(mode="json", by_alias=True, exclude_unset=True)


def _diff_paths(before: Any, after: Any, location: str = "#") -> List[str]:
    """Pointers at which two structured-value trees differ (object member order ignored)."""
    if isinstance(before, dict) and isinstance(after, dict):
        paths: List[str] = []
        for key in list(before) + [k for k in after if k not in before]:
            child = child_pointer(location, key)
            if key not in before or key not in after:
                paths.append(child)
            else:
                paths.extend(_diff_paths(before[key], after[key], child))
        return paths
    if isinstance(before, list) and isinstance(after, list) and len(before) == len(after):
        paths = []
        for index, (b, a) in enumerate(zip(before, after)):
            paths.extend(_diff_paths(b, a, child_pointer(location, index)))
        return paths
    if type(before) is not type(after) or before != after:
        return [location]
    return []


def check_round_trip(source: Source) -> RoundTripResult:
    """Decode then re-encode a document and compare the two trees.

    Equality is semantic: same keys and values, any member order.

    Raises:
        DocumentParseError: If the document does not decode
    """
    raw = _load_raw(source)
    encoded = _decode(raw).to_document()
    input_hash = compute_document_hash(raw)
    output_hash = compute_document_hash(encoded)
    differences = [] if input_hash == output_hash else _diff_paths(raw, encoded)
    return RoundTripResult(
        ok=input_hash == output_hash,
        input_hash=input_hash,
        output_hash=output_hash,
        differences=differences,
    )


def validate(source: Source) -> ValidationResult:
    """
    Validation/preflight for a single document.

    Errors: the document does not decode, or a `$ref` does not resolve or
    loops. Warnings: external references, values captured raw by
    VariantOrUnknown fields, extension keys without the `x-` prefix, and
    `asyncapi` versions other than 2.x/3.x.

    This is READ-ONLY - no side effects, no file writes, no mutations.
    """
    errors: List[ValidationIssue] = []
    warnings: List[ValidationIssue] = []

    # 1. Structure (ERROR)
    try:
        document = load_document(source)
    except FileNotFoundError as e:
        errors.append(ValidationIssue(
            code=ValidationCode.FILE_NOT_FOUND.value,
            message=str(e),
        ))
        return ValidationResult(ok=False, errors=errors, warnings=warnings)
    except DocumentParseError as e:
        if e.errors:
            for err in e.errors:
                errors.append(ValidationIssue(
                    code=e.code.value,
                    message=f"{err['msg']} [{err['type']}]",
                    location=err["loc"],
                ))
        else:
            errors.append(ValidationIssue(code=e.code.value, message=e.message))
        return ValidationResult(ok=False, errors=errors, warnings=warnings)

    # 2. Version (WARNING)
    if not document.is_supported_version():
        warnings.append(ValidationIssue(
            code=ValidationCode.UNSUPPORTED_VERSION.value,
            message=(
                f"asyncapi version '{document.asyncapi}' is not a "
                f"{'.x or '.join(SUPPORTED_MAJOR_VERSIONS)}.x version"
            ),
            location="#/asyncapi",
        ))

    # 3. References (ERROR, external ones WARNING)
    for issue in ReferenceResolver(document).check():
        target = warnings if issue.code == ValidationCode.EXTERNAL_REFERENCE else errors
        target.append(ValidationIssue(
            code=issue.code.value,
            message=issue.message,
            location=issue.location,
            pointer=issue.pointer,
        ))

    # 4. Raw-captured variants and extension naming (WARNING)
    for location, node in iter_nodes(document):
        if isinstance(node, (VariantOrUnknown, VariantOrUnknownOrEmpty)) and node.is_unknown:
            warnings.append(ValidationIssue(
                code=ValidationCode.UNKNOWN_VARIANT.value,
                message=f"Value not recognized, kept as-is: {node.as_unknown()!r}",
                location=location,
            ))
        elif isinstance(node, BaseModel):
            for key in (node.model_extra or {}):
                if not key.startswith(EXTENSION_PREFIX):
                    warnings.append(ValidationIssue(
                        code=ValidationCode.NON_STANDARD_EXTENSION.value,
                        message=f"Unknown field '{key}' on {type(node).__name__} (extensions should start with '{EXTENSION_PREFIX}')",
                        location=location,
                    ))

    # Sort for deterministic output
    def sort_key(issue: ValidationIssue) -> tuple:
        return (issue.code, issue.location or "", issue.pointer or "", issue.message)

    return ValidationResult(
        ok=len(errors) == 0,
        errors=sorted(errors, key=sort_key),
        warnings=sorted(warnings, key=sort_key),
    )
