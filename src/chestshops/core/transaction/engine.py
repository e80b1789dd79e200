"""Buy/sell protocol between a shop container and a player container.

Both operations check every precondition before touching any container,
then mutate in a fixed order with compensation for the one step that can
still fail:

    buy:  buyer pays -> items move shop->buyer (refund on failure)
          -> shop is credited -> earnings recorded
    sell: items move seller->shop -> shop pays (items returned on failure)
          -> seller is credited

The final credit step is covered by the preceding space check and is not
compensated; a failure there is logged at ERROR.
"""

from __future__ import annotations

import logging

from chestshops.core.container import (
    Container,
    add_items,
    available_space,
    count,
    remove_items,
    transfer,
)
from chestshops.core.items import strip_namespace
from chestshops.core.shop import Listing, Shop
from chestshops.core.transaction.models import (
    Failure,
    FailureReason,
    Success,
    TransactionResult,
)

logger = logging.getLogger(__name__)


def _stock_message(stock: int) -> str:
    if stock == 0:
        return "This item is out of stock."
    return f"Not enough stock. Available: {stock}"


def _summary(verb: str, quantity: int, item_id: str, total: int, currency_id: str) -> str:
    item, currency = strip_namespace(item_id), strip_namespace(currency_id)
    return f"{verb} {quantity}x {item} for {total}x {currency}"


def buy(shop: Shop, listing: Listing, buyer: Container, quantity: int) -> TransactionResult:
    """Customer buys `quantity` units of the listing's item from the shop.

    Args:
        shop: Shop selling the item.
        listing: Listing being traded against.
        buyer: The customer's inventory.
        quantity: Units requested.

    Returns:
        Success with the quantity bought, or Failure with the first failing
        precondition in this order: SHOP_DOESNT_SELL, INVALID_QUANTITY,
        SHOP_NOT_CONFIGURED, INSUFFICIENT_STOCK, INSUFFICIENT_FUNDS,
        INVENTORY_FULL, INSUFFICIENT_SPACE.
    """
    if not listing.can_buy_from():
        return Failure(FailureReason.SHOP_DOESNT_SELL, "This shop doesn't sell items.")
    if quantity <= 0:
        return Failure(FailureReason.INVALID_QUANTITY, "Invalid quantity.")
    item_id = listing.item_id
    currency_id = listing.currency_item_id
    if not item_id or not currency_id:
        return Failure(FailureReason.SHOP_NOT_CONFIGURED, "Shop is not configured.")

    stock = count(shop.inventory, item_id)
    if stock < quantity:
        return Failure(FailureReason.INSUFFICIENT_STOCK, _stock_message(stock))

    total = listing.buy_price * quantity
    funds = count(buyer, currency_id)
    if funds < total:
        return Failure(
            FailureReason.INSUFFICIENT_FUNDS,
            f"Not enough {strip_namespace(currency_id)}. Need {total}, have {funds}",
        )
    if available_space(buyer, item_id) < quantity:
        return Failure(FailureReason.INVENTORY_FULL, "Your inventory is full.")
    if available_space(shop.inventory, currency_id) < total:
        return Failure(FailureReason.INSUFFICIENT_SPACE, "Shop has no room for payment.")

    if not remove_items(buyer, currency_id, total):
        return Failure(FailureReason.TRANSACTION_ERROR, "Failed to process payment.")

    if not transfer(shop.inventory, buyer, item_id, quantity):
        if not add_items(buyer, currency_id, total):
            logger.error(
                "Refund of %dx %s to buyer failed after item transfer failure", total, currency_id
            )
        return Failure(FailureReason.TRANSACTION_ERROR, "Failed to transfer items.")

    if not add_items(shop.inventory, currency_id, total):
        logger.error(
            "Shop %r could not absorb %dx %s after a passed space check",
            shop.display_name,
            total,
            currency_id,
        )

    shop.add_earnings(total)
    logger.debug("Buy from %r: %dx %s for %d", shop.display_name, quantity, item_id, total)
    return Success(quantity, _summary("Bought", quantity, item_id, total, currency_id))


def sell(shop: Shop, listing: Listing, seller: Container, quantity: int) -> TransactionResult:
    """Customer sells `quantity` units of the listing's item to the shop.

    Args:
        shop: Shop buying the item.
        listing: Listing being traded against.
        seller: The customer's inventory.
        quantity: Units offered.

    Returns:
        Success with the quantity sold, or Failure with the first failing
        precondition in this order: SHOP_DOESNT_BUY, INVALID_QUANTITY,
        SHOP_NOT_CONFIGURED, INSUFFICIENT_STOCK, INSUFFICIENT_FUNDS,
        INSUFFICIENT_SPACE, INVENTORY_FULL.
    """
    if not listing.can_sell_to():
        return Failure(FailureReason.SHOP_DOESNT_BUY, "This shop doesn't buy items.")
    if quantity <= 0:
        return Failure(FailureReason.INVALID_QUANTITY, "Invalid quantity.")
    item_id = listing.item_id
    currency_id = listing.currency_item_id
    if not item_id or not currency_id:
        return Failure(FailureReason.SHOP_NOT_CONFIGURED, "Shop is not configured.")

    held = count(seller, item_id)
    if held < quantity:
        return Failure(
            FailureReason.INSUFFICIENT_STOCK,
            f"You don't have enough items. Have: {held}",
        )

    total = listing.sell_price * quantity
    shop_funds = count(shop.inventory, currency_id)
    if shop_funds < total:
        return Failure(
            FailureReason.INSUFFICIENT_FUNDS,
            f"Shop doesn't have enough {strip_namespace(currency_id)} to pay.",
        )
    if available_space(shop.inventory, item_id) < quantity:
        return Failure(FailureReason.INSUFFICIENT_SPACE, "Shop inventory is full.")
    if available_space(seller, currency_id) < total:
        return Failure(FailureReason.INVENTORY_FULL, "Your inventory is full.")

    if not transfer(seller, shop.inventory, item_id, quantity):
        return Failure(FailureReason.TRANSACTION_ERROR, "Failed to transfer items.")

    if not remove_items(shop.inventory, currency_id, total):
        if not transfer(shop.inventory, seller, item_id, quantity):
            logger.error(
                "Returning %dx %s to seller failed after payment failure", quantity, item_id
            )
        return Failure(FailureReason.TRANSACTION_ERROR, "Failed to process payment.")

    if not add_items(seller, currency_id, total):
        logger.error(
            "Seller could not absorb %dx %s after a passed space check", total, currency_id
        )

    shop.mark_dirty()
    logger.debug("Sell to %r: %dx %s for %d", shop.display_name, quantity, item_id, total)
    return Success(quantity, _summary("Sold", quantity, item_id, total, currency_id))
