"""Shared pytest fixtures."""

import pytest

from passhash.core.config import get_settings
from passhash.core.container import (
    get_bcrypt_primitive,
    get_logger,
    get_password_hasher,
)
from tests.utils.mcf_samples import FakeBcryptPrimitive


@pytest.fixture
def fake_primitive() -> FakeBcryptPrimitive:
    """In-memory bcrypt primitive (no key schedule)."""
    return FakeBcryptPrimitive()


@pytest.fixture
def clear_container_caches():
    """Reset cached settings and singletons around a test."""
    caches = (get_settings, get_logger, get_bcrypt_primitive, get_password_hasher)
    for cached in caches:
        cached.cache_clear()
    yield
    for cached in caches:
        cached.cache_clear()
