"""Unit tests for the dependency container."""

import os
from unittest.mock import patch

import pytest

from passhash.core.container import (
    get_bcrypt_primitive,
    get_logger,
    get_password_hasher,
)
from passhash.infrastructure.logging.console_adapter import ConsoleAdapter
from passhash.infrastructure.security import BcryptPrimitive, PasswordHasher


@pytest.mark.unit
class TestContainer:
    def test_password_hasher_singleton(self, clear_container_caches):
        hasher = get_password_hasher()

        assert isinstance(hasher, PasswordHasher)
        assert get_password_hasher() is hasher

    def test_password_hasher_uses_primitive_singleton(self, clear_container_caches):
        hasher = get_password_hasher()

        assert isinstance(get_bcrypt_primitive(), BcryptPrimitive)
        assert hasher._primitive is get_bcrypt_primitive()
        assert hasher._logger is None

    def test_container_primitive_has_no_logger(self, clear_container_caches):
        primitive = get_password_hasher()._primitive

        assert primitive._logger is None

    @pytest.mark.parametrize(("env", "use_json"), [("testing", True), ("development", False)])
    def test_logger_renderer_follows_environment(
        self, clear_container_caches, env, use_json
    ):
        with (
            patch.dict(os.environ, {"PASSHASH_ENVIRONMENT": env}, clear=True),
            patch(
                "passhash.infrastructure.logging.console_adapter.ConsoleAdapter.__init__",
                return_value=None,
            ) as mock_init,
            patch(
                "passhash.infrastructure.logging.console_adapter.ConsoleAdapter.bind"
            ) as mock_bind,
        ):
            get_logger()

        mock_init.assert_called_once_with(use_json=use_json, level="INFO")
        mock_bind.assert_called_once_with(app="passhash")

    def test_logger_singleton(self, clear_container_caches):
        logger = get_logger()

        assert isinstance(logger, ConsoleAdapter)
        assert get_logger() is logger
