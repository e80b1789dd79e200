"""Shop transaction engine."""

from chestshops.core.transaction.engine import buy, sell
from chestshops.core.transaction.models import (
    Failure,
    FailureReason,
    Success,
    TransactionResult,
)

__all__ = [
    # Models
    "Failure",
    "FailureReason",
    "Success",
    "TransactionResult",
    # Engine
    "buy",
    "sell",
]
