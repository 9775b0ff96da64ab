"""Shared pytest setup for the parcel tracker test suites."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.postgres",
    "tests.fixtures.datagen",
]

TESTS_ROOT = Path(__file__).parent.resolve()
SUITE_MARKERS = {"unit", "contract", "integration", "functional", "e2e"}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Mark each test with the suite it lives in (``tests/<suite>/...``)."""
    for item in items:
        try:
            suite = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        if suite in SUITE_MARKERS and item.get_closest_marker(suite) is None:
            item.add_marker(getattr(pytest.mark, suite))


@pytest.fixture
def engine(request: pytest.FixtureRequest) -> Engine:
    """The engine fixture named by the test's indirect parameter.

    ```py
    @pytest.mark.parametrize("engine", ["sqlite_engine_memory"], indirect=True)
    def test_something(engine): ...
    ```
    """
    return request.getfixturevalue(request.param)
