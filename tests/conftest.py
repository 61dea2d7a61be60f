from __future__ import annotations

import pytest
from hypothesis import settings

from conditional.kernel import reset_default_kernel

settings.register_profile("default", max_examples=100)
settings.register_profile("ci", max_examples=1000, deadline=None)
settings.load_profile("default")


@pytest.fixture(autouse=True)
def _fresh_default_kernel():
    yield
    reset_default_kernel()
