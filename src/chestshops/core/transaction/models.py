"""Transaction result models.

A trade never raises for business-rule failures; it returns one of two
variants:

    match engine.buy(shop, listing, buyer, 5):
        case Success(quantity=qty, message=msg):
            ...
        case Failure(reason=FailureReason.INSUFFICIENT_FUNDS):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class FailureReason(Enum):
    """Why a trade was refused. Every reason is user-visible."""

    INSUFFICIENT_FUNDS = auto()  # payer lacks currency
    INSUFFICIENT_STOCK = auto()  # shop (buy) or seller (sell) lacks items
    INSUFFICIENT_SPACE = auto()  # shop container cannot absorb the inflow
    INVENTORY_FULL = auto()  # player container cannot absorb the inflow
    SHOP_NOT_CONFIGURED = auto()
    SHOP_DOESNT_BUY = auto()
    SHOP_DOESNT_SELL = auto()
    INVALID_QUANTITY = auto()
    TRANSACTION_ERROR = auto()  # a mutation failed after preconditions passed


@dataclass(frozen=True, slots=True)
class Success:
    quantity: int
    message: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    reason: FailureReason
    message: str

    @property
    def ok(self) -> bool:
        return False


type TransactionResult = Success | Failure
