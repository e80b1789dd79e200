"""External integration adapters.

Provides protocols and local implementations for:
- ClaimChecker: land-claim plugin integration
- UIGateway: surfaces, native container screens and chat

Usage:
    from chestshops.adapters import LocalUIGateway, resolve_claim_checker

    world = World(ui=LocalUIGateway(), claims=resolve_claim_checker(my_claims))
"""

from chestshops.adapters.claims import AllowAllClaims, FailOpenClaims, resolve_claim_checker
from chestshops.adapters.models import Message, MessageColor, SurfaceKind
from chestshops.adapters.protocol import ClaimChecker, Surface, UIGateway
from chestshops.adapters.ui import LocalUIGateway

__all__ = [
    # Protocols
    "ClaimChecker",
    "Surface",
    "UIGateway",
    # Implementations
    "AllowAllClaims",
    "FailOpenClaims",
    "LocalUIGateway",
    "resolve_claim_checker",
    # Types
    "Message",
    "MessageColor",
    "SurfaceKind",
]
