"""Dependency factories (composition root).

Application-scoped singletons:
- Logging (structlog console adapter)
- bcrypt primitive (adapter over the ``bcrypt`` library)
- Password hasher (the facade)

Infrastructure is imported lazily so the domain layer never depends on it.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from passhash.core.config import get_settings

if TYPE_CHECKING:
    from passhash.domain.protocols.bcrypt_primitive_protocol import (
        BcryptPrimitiveProtocol,
    )
    from passhash.domain.protocols.logger_protocol import LoggerProtocol
    from passhash.domain.protocols.password_hashing_protocol import (
        PasswordHashingProtocol,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development/production: ConsoleAdapter (human-readable)
    - testing/ci: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger bound with the application name.
    """
    from passhash.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    use_json = settings.is_testing or settings.is_ci
    adapter = ConsoleAdapter(use_json=use_json, level=settings.log_level)
    return adapter.bind(app=settings.app_name)


@lru_cache()
def get_bcrypt_primitive() -> "BcryptPrimitiveProtocol":
    """Get the bcrypt primitive singleton.

    Built without a logger: hashing and verification perform no I/O.

    Returns:
        BcryptPrimitive backed by the ``bcrypt`` library.
    """
    from passhash.infrastructure.security import BcryptPrimitive

    return BcryptPrimitive()


@lru_cache()
def get_password_hasher() -> "PasswordHashingProtocol":
    """Get the password hasher singleton.

    Neither the facade nor its primitive gets a logger; every failure
    is returned to the caller. Callers that want log events build their
    own instance: ``PasswordHasher(logger=get_logger())``.

    Returns:
        PasswordHasher implementing PasswordHashingProtocol.
    """
    from passhash.infrastructure.security import PasswordHasher

    return PasswordHasher(primitive=get_bcrypt_primitive())
