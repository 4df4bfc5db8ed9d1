from __future__ import annotations

from collections.abc import Iterator

import pytest

import lib_greeter


@pytest.fixture(autouse=True)
def _clean_error_channel() -> Iterator[None]:
    """Start and finish every test with an empty process-wide error channel."""

    lib_greeter.clear_error()
    yield
    lib_greeter.clear_error()
