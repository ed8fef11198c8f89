from __future__ import annotations

from collections.abc import Iterator

import pytest

from labyrinth.util import rng


@pytest.fixture(autouse=True)
def reset_global_rng() -> Iterator[None]:
    """Give every test the same global random streams."""
    rng.init("test")
    yield
    rng.init("test")
