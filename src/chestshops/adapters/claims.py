"""Claim checker implementations.

`AllowAllClaims` is the default when no claim plugin is installed.
`FailOpenClaims` wraps a real integration so that its failures never block
shop creation.
"""

from __future__ import annotations

import logging
from uuid import UUID

from chestshops.adapters.protocol import ClaimChecker

logger = logging.getLogger(__name__)


class AllowAllClaims:
    """No claim plugin: every location is allowed and unowned."""

    def can_create_shop(self, player_id: UUID, dimension: str, x: int, z: int) -> bool:
        return True

    def claim_owner_name(self, dimension: str, x: int, z: int) -> str | None:
        return None


class FailOpenClaims:
    """Delegate to another checker, treating its exceptions as "allowed".

    Args:
        inner: The claim integration to consult.
    """

    def __init__(self, inner: ClaimChecker) -> None:
        self._inner = inner

    @property
    def inner(self) -> ClaimChecker:
        return self._inner

    def can_create_shop(self, player_id: UUID, dimension: str, x: int, z: int) -> bool:
        try:
            return bool(self._inner.can_create_shop(player_id, dimension, x, z))
        except Exception:
            logger.warning(
                "Claim check failed at %s (%d, %d); allowing", dimension, x, z, exc_info=True
            )
            return True

    def claim_owner_name(self, dimension: str, x: int, z: int) -> str | None:
        try:
            return self._inner.claim_owner_name(dimension, x, z)
        except Exception:
            logger.warning("Claim owner lookup failed at %s (%d, %d)", dimension, x, z)
            return None


def resolve_claim_checker(candidate: ClaimChecker | None) -> ClaimChecker:
    """Pick the claim checker once at startup.

    Args:
        candidate: Integration supplied by the host, if any.

    Returns:
        `candidate` wrapped fail-open, or AllowAllClaims when absent.
    """
    if candidate is None:
        logger.info("No claim integration configured; shops may be created anywhere")
        return AllowAllClaims()
    if isinstance(candidate, (AllowAllClaims, FailOpenClaims)):
        return candidate
    logger.info("Using claim integration %s", type(candidate).__name__)
    return FailOpenClaims(candidate)
