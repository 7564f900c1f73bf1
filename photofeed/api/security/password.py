"""Password hashing utilities using argon2."""

from __future__ import annotations

import hmac
import logging
import secrets
from dataclasses import dataclass

from argon2.exceptions import HashingError
from argon2.low_level import Type, hash_secret_raw

logger = logging.getLogger(__name__)

SEPARATOR = "."


@dataclass(frozen=True)
class PasswordConfig:
    """Password hashing parameters.

    Hashing and verification must share these values; changing any of
    them makes previously stored hashes unverifiable.
    """

    time_cost: int = 3
    memory_cost: int = 65536  # 64 MiB
    parallelism: int = 4
    salt_bytes: int = 16
    digest_bytes: int = 64


class PasswordService:
    """Password hashing and verification using Argon2id.

    Stored values have the form ``<salt hex>.<digest hex>`` where the digest
    is the raw Argon2id output for the password and salt.
    """

    def __init__(self, config: PasswordConfig | None = None) -> None:
        """Initialize password hasher.

        Args:
            config: Hashing parameters (defaults to production cost).
        """
        self._config = config or PasswordConfig()

    @property
    def config(self) -> PasswordConfig:
        """Hashing parameters in use."""
        return self._config

    def hash(self, password: str) -> str:
        """Hash a password with a fresh random salt.

        Args:
            password: Plain text password.

        Returns:
            Encoded ``salt.digest`` string.
        """
        salt = secrets.token_bytes(self._config.salt_bytes)
        digest = self._derive(password, salt)
        return f"{salt.hex()}{SEPARATOR}{digest.hex()}"

    def verify(self, password: str, encoded: str) -> bool:
        """Verify a password against an encoded hash.

        A malformed encoded value never verifies.

        Args:
            password: Plain text password to verify.
            encoded: Stored ``salt.digest`` string.

        Returns:
            True if password matches, False otherwise.
        """
        try:
            salt_hex, digest_hex = encoded.split(SEPARATOR)
            salt = bytes.fromhex(salt_hex)
            expected = bytes.fromhex(digest_hex)
        except (AttributeError, ValueError):
            logger.warning("Stored password hash is malformed")
            return False

        if len(expected) != self._config.digest_bytes:
            logger.warning("Stored password hash has unexpected digest length")
            return False

        try:
            derived = self._derive(password, salt)
        except HashingError:
            logger.warning("Stored password hash has an unusable salt")
            return False

        return hmac.compare_digest(derived, expected)

    def _derive(self, password: str, salt: bytes) -> bytes:
        return hash_secret_raw(
            secret=password.encode("utf-8"),
            salt=salt,
            time_cost=self._config.time_cost,
            memory_cost=self._config.memory_cost,
            parallelism=self._config.parallelism,
            hash_len=self._config.digest_bytes,
            type=Type.ID,
        )
