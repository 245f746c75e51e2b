"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed asyncapi_types package.
"""

import json
from pathlib import Path

import pytest

HERE = Path(__file__).resolve().parent
FIXTURES = HERE.parent / "fixtures"


def pytest_addoption(parser):
    """Add gated perf test option."""
    parser.addoption(
        "--run-perf",
        action="store_true",
        default=False,
        help="Run performance sentinel benchmarks (gated)."
    )


def pytest_collection_modifyitems(config, items):
    """Skip perf-marked tests unless --run-perf is set."""
    if config.getoption("--run-perf"):
        return
    skip_perf = pytest.mark.skip(reason="perf tests gated; pass --run-perf")
    for item in items:
        if "perf" in item.keywords:
            item.add_marker(skip_perf)


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def account_service_data() -> dict:
    """The account service document as a fresh structured-value tree."""
    path = FIXTURES / "account_service" / "asyncapi.json"
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture
def broken_refs_data() -> dict:
    path = FIXTURES / "broken_refs" / "asyncapi.json"
    return json.loads(path.read_text(encoding="utf-8"))
