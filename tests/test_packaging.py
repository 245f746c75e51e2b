"""Packaging regression tests.

Tests that verify the package structure and version reporting.
"""

from pathlib import Path

import pytest


def test_source_layout():
    """Packages live under src/ and test data stays out of them."""
    repo_root = Path(__file__).resolve().parent.parent
    src_pkg = repo_root / "src" / "asyncapi_types"

    assert src_pkg.exists(), "asyncapi_types package should exist in src/"
    for sub in ("kernel", "model", "model/bindings", "_internal", "_internal/io"):
        assert (src_pkg / sub).exists(), f"asyncapi_types/{sub} should exist"

    assert not (repo_root / "src" / "fixtures").exists(), "fixtures should not be packaged"
    assert not (src_pkg / "fixtures").exists(), "fixtures should not be packaged"


def test_import_boundary():
    import asyncapi_types
    import asyncapi_types.kernel  # noqa: F401
    import asyncapi_types.model  # noqa: F401

    # In dev mode it's "dev", in installed mode the declared version
    assert asyncapi_types.__version__ in ("0.1.0", "dev")


def test_console_script_entry_point():
    from asyncapi_types import cli

    assert callable(cli.main)


def test_project_metadata_declares_no_readme():
    """Only files that ship with the sdist may be named as the long description."""
    tomllib = pytest.importorskip("tomllib")
    repo_root = Path(__file__).resolve().parent.parent
    project = tomllib.loads((repo_root / "pyproject.toml").read_text(encoding="utf-8"))["project"]

    assert "readme" not in project
    assert project["name"] == "asyncapi-types"
