"""Shared pytest fixtures for tincture tests."""

import pytest

from tincture.core.context import BuildContext


@pytest.fixture
def ctx() -> BuildContext:
    """Return a fresh build context with the master brand loaded."""
    return BuildContext.create(brand="master")


@pytest.fixture
def empty_ctx() -> BuildContext:
    """Return a fresh build context with no defaults."""
    return BuildContext.create(with_defaults=False)
