"""Shared pytest fixtures for the test suite."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pytest

from manner.i18n import load_bundle
from manner.status import Status


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def bundle() -> Mapping[str, Any]:
    """Return the bundled English messages."""
    return load_bundle("en")


@pytest.fixture
def kinds():
    """Reduce a status map to ``{field: kind}`` for compact assertions."""

    def reduce(result: Mapping[str, Status]) -> dict[str, str]:
        return {field_name: status.kind for field_name, status in result.items()}

    return reduce
