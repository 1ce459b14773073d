"""
Record id and check-number generation.

``BaseIdProvider`` is the seam tests use to supply deterministic ids and
suffixes; ``RandomIdProvider`` is the production implementation.
"""

import logging
import secrets
import string
import uuid
from abc import ABC, abstractmethod
from collections.abc import Iterable

logger = logging.getLogger(__name__)

CHECK_ALPHABET = string.ascii_uppercase + string.digits


class BaseIdProvider(ABC):
    """Interface that every id provider must implement."""

    @abstractmethod
    def new_record_id(self) -> str:
        """Return a fresh, unique record id."""

    @abstractmethod
    def random_suffix(self, length: int) -> str:
        """Return *length* characters drawn from ``A-Z0-9``."""


class RandomIdProvider(BaseIdProvider):
    """UUID4 record ids and cryptographically random check suffixes."""

    def new_record_id(self) -> str:
        return str(uuid.uuid4())

    def random_suffix(self, length: int) -> str:
        return "".join(secrets.choice(CHECK_ALPHABET) for _ in range(length))


def generate_check_number(
    provider: BaseIdProvider,
    existing: Iterable[str] = (),
    prefix: str = "CHK-",
    length: int = 6,
    max_attempts: int = 20,
) -> str:
    """Build a ``<prefix><suffix>`` check number not present in *existing*.

    Gives up avoiding collisions after *max_attempts* draws and returns the
    last candidate; with 36**6 combinations that only happens with a
    degenerate provider.
    """
    taken = set(existing)
    candidate = f"{prefix}{provider.random_suffix(length)}"
    attempts = 1
    while candidate in taken and attempts < max_attempts:
        candidate = f"{prefix}{provider.random_suffix(length)}"
        attempts += 1
    if candidate in taken:
        logger.warning("Check number %s collides after %d attempts", candidate, attempts)
    return candidate
