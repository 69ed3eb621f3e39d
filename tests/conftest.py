from collections.abc import Iterator

import pytest

from hookbus.registry import reset_dispatcher


@pytest.fixture(autouse=True)
def _fresh_dispatcher() -> Iterator[None]:
    reset_dispatcher()
    yield
    reset_dispatcher()
