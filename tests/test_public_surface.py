"""Test public API surface - ensure imports work correctly and no side effects.

This test verifies:
- asyncapi_types exposes the load/dump/validate functions
- Functions work on tiny fixtures
- Submodule imports don't shadow function exports
"""

from pathlib import Path

import pytest

FIXTURES = Path(__file__).resolve().parent.parent / "fixtures"


def test_api_exports_core_functions():
    from asyncapi_types.api import check_round_trip, dump_document, load_document, validate

    for func in (check_round_trip, dump_document, load_document, validate):
        assert callable(func)


def test_package_reexports_api():
    import asyncapi_types
    from asyncapi_types import api

    assert asyncapi_types.validate is api.validate
    assert asyncapi_types.load_document is api.load_document
    for name in asyncapi_types.__all__:
        assert hasattr(asyncapi_types, name), name


def test_api_functions_work_on_fixtures():
    from asyncapi_types import AsyncAPI, ValidationResult, load_document, validate

    path = FIXTURES / "streetlights" / "asyncapi.yaml"

    assert isinstance(load_document(path), AsyncAPI)
    result = validate(path)
    assert isinstance(result, ValidationResult)
    assert result.ok is True


def test_no_module_shadowing():
    """Importing asyncapi_types.model.document doesn't shadow the document helpers."""
    from asyncapi_types import load_document as before

    import asyncapi_types.model.document  # noqa: F401
    import asyncapi_types._internal.io.document  # noqa: F401

    from asyncapi_types import load_document as after
    assert before is after
    assert callable(after)


@pytest.mark.parametrize("name", [
    "ReferenceOr",
    "VariantOrUnknown",
    "VariantOrUnknownOrEmpty",
    "VecOrSingle",
    "ChannelMessages",
])
def test_wrappers_are_public(name):
    import asyncapi_types

    assert isinstance(getattr(asyncapi_types, name), type)
