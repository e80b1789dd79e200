"""Tests for the buy/sell transaction engine.

Critical Invariants:
- Preconditions are checked in a fixed order and never mutate state
- A successful buy moves currency and items and adds to earnings
- Sell never touches earnings
- Failed mutations are compensated
- Losing the final deposit is logged, not rolled back
"""

import logging
from uuid import uuid4

import pytest

from chestshops.core.container import Container, add_items, count
from chestshops.core.items import ItemStack
from chestshops.core.shop import Listing, Shop
from chestshops.core.transaction import Failure, FailureReason, Success, buy, sell

IRON = "iron_bar"
COPPER = "copper_bar"


@pytest.fixture
def shop():
    """10 iron_bar, buy 2 / sell 1 copper_bar."""
    inventory = Container(9)
    add_items(inventory, IRON, 10)
    listing = Listing(item_id=IRON, currency_item_id=COPPER, buy_price=2, sell_price=1)
    return Shop(owner_id=uuid4(), owner_name="Ava", inventory=inventory, listings=[listing])


@pytest.fixture
def listing(shop):
    return shop.get_listing(0)


@pytest.fixture
def buyer():
    inventory = Container(9)
    add_items(inventory, COPPER, 25)
    return inventory


def snapshot(*containers):
    return [c.snapshot() for c in containers]


def test_buy_scenario(shop, listing, buyer):
    """Buyer with 25 copper buys 5 iron at 2 each."""
    result = buy(shop, listing, buyer, 5)

    assert result == Success(5, "Bought 5x iron_bar for 10x copper_bar")
    assert count(buyer, COPPER) == 15
    assert count(buyer, IRON) == 5
    assert count(shop.inventory, COPPER) == 10
    assert count(shop.inventory, IRON) == 5
    assert shop.total_earnings == 10
    assert shop.dirty


def test_buy_insufficient_funds_changes_nothing(shop, listing):
    poor = Container(9)
    add_items(poor, COPPER, 5)
    before = snapshot(shop.inventory, poor)

    result = buy(shop, listing, poor, 5)

    assert isinstance(result, Failure)
    assert result.reason is FailureReason.INSUFFICIENT_FUNDS
    assert result.message == "Not enough copper_bar. Need 10, have 5"
    assert snapshot(shop.inventory, poor) == before
    assert shop.total_earnings == 0


def test_buy_keeps_trade_when_shop_deposit_is_lost(monkeypatch, caplog, shop, listing, buyer):
    """Payment already left the buyer; the trade stands and the loss is logged."""
    from chestshops.core.transaction import engine

    def add_items_except_shop(container, item_id, quantity):
        if container is shop.inventory:
            return False
        return add_items(container, item_id, quantity)

    monkeypatch.setattr(engine, "add_items", add_items_except_shop)

    with caplog.at_level(logging.ERROR, logger="chestshops.core.transaction.engine"):
        result = buy(shop, listing, buyer, 5)

    assert result == Success(5, "Bought 5x iron_bar for 10x copper_bar")
    assert count(buyer, COPPER) == 15
    assert count(buyer, IRON) == 5
    assert count(shop.inventory, COPPER) == 0
    assert shop.total_earnings == 10
    assert [record.levelno for record in caplog.records] == [logging.ERROR]
    assert "could not absorb 10x copper_bar" in caplog.text


def test_buy_inventory_full(shop, listing):
    full = Container(1, slots=[ItemStack(COPPER, 64)])
    before = snapshot(shop.inventory, full)

    result = buy(shop, listing, full, 1)

    assert result.reason is FailureReason.INVENTORY_FULL
    assert snapshot(shop.inventory, full) == before


def test_buy_shop_without_room_for_payment(listing, buyer):
    packed = Container(1, slots=[ItemStack(IRON, 10)])
    shop = Shop(uuid4(), "Ava", packed, listings=[listing])

    assert buy(shop, listing, buyer, 1).reason is FailureReason.INSUFFICIENT_SPACE


@pytest.mark.parametrize(
    "stock,message",
    [(0, "This item is out of stock."), (3, "Not enough stock. Available: 3")],
)
def test_buy_stock_messages(listing, buyer, stock, message):
    inventory = Container(9)
    if stock:
        add_items(inventory, IRON, stock)
    shop = Shop(uuid4(), "Ava", inventory, listings=[listing])

    result = buy(shop, listing, buyer, 5)
    assert result == Failure(FailureReason.INSUFFICIENT_STOCK, message)


@pytest.mark.parametrize(
    "listing,quantity,reason",
    [
        (Listing(item_id=IRON, currency_item_id=COPPER, sell_price=1), 1, "SHOP_DOESNT_SELL"),
        (Listing(item_id=IRON, currency_item_id=COPPER, buy_price=2), 0, "INVALID_QUANTITY"),
        (Listing(currency_item_id=COPPER, buy_price=2), 1, "SHOP_NOT_CONFIGURED"),
        # not selling wins over a bad quantity
        (Listing(item_id=IRON, currency_item_id=COPPER), -1, "SHOP_DOESNT_SELL"),
    ],
)
def test_buy_precondition_order(shop, buyer, listing, quantity, reason):
    result = buy(shop, listing, buyer, quantity)
    assert result.reason is FailureReason[reason]
    assert not result.ok


def test_buy_funds_checked_before_space(listing):
    """Poor buyer with a full inventory gets INSUFFICIENT_FUNDS, not INVENTORY_FULL."""
    shop = Shop(uuid4(), "Ava", Container(9, slots=[ItemStack(IRON, 10)]), listings=[listing])
    broke_and_full = Container(1, slots=[ItemStack(COPPER, 1)])
    assert buy(shop, listing, broke_and_full, 1).reason is FailureReason.INSUFFICIENT_FUNDS


def test_buy_preserves_item_attributes(listing, buyer):
    special = ItemStack(IRON, 4, durability=0.5, metadata={"smith": "Ava"})
    shop = Shop(uuid4(), "Ava", Container(9, slots=[special]), listings=[listing])

    assert buy(shop, listing, buyer, 3).ok
    bought = [stack for _, stack in buyer.stacks() if stack.item_id == IRON]
    assert bought == [special.with_quantity(3)]


def test_buy_refunds_when_item_transfer_fails(monkeypatch, shop, listing, buyer):
    from chestshops.core.transaction import engine

    monkeypatch.setattr(engine, "transfer", lambda *args: False)
    before = snapshot(shop.inventory, buyer)

    result = buy(shop, listing, buyer, 5)

    assert result.reason is FailureReason.TRANSACTION_ERROR
    assert snapshot(shop.inventory, buyer) == before
    assert shop.total_earnings == 0


def test_sell_scenario(shop, listing):
    seller = Container(9)
    add_items(seller, IRON, 4)
    add_items(shop.inventory, COPPER, 10)

    result = sell(shop, listing, seller, 4)

    assert result == Success(4, "Sold 4x iron_bar for 4x copper_bar")
    assert count(seller, IRON) == 0
    assert count(seller, COPPER) == 4
    assert count(shop.inventory, IRON) == 14
    assert count(shop.inventory, COPPER) == 6
    assert shop.total_earnings == 0, "sell never adds to earnings"
    assert shop.dirty


def test_sell_shop_cannot_pay(shop, listing):
    seller = Container(9)
    add_items(seller, IRON, 4)
    before = snapshot(shop.inventory, seller)

    result = sell(shop, listing, seller, 4)

    assert result.reason is FailureReason.INSUFFICIENT_FUNDS
    assert snapshot(shop.inventory, seller) == before


@pytest.mark.parametrize("held", [0, 2])
def test_sell_seller_lacks_items(shop, listing, held):
    seller = Container(9)
    if held:
        add_items(seller, IRON, held)
    result = sell(shop, listing, seller, 3)
    expected = f"You don't have enough items. Have: {held}"
    assert result == Failure(FailureReason.INSUFFICIENT_STOCK, expected)


def test_sell_shop_full(listing):
    full = Container(2, slots=[ItemStack("Rock", 64), ItemStack(COPPER, 64)])
    shop = Shop(uuid4(), "Ava", full, listings=[listing])
    seller = Container(9)
    add_items(seller, IRON, 1)

    assert sell(shop, listing, seller, 1).reason is FailureReason.INSUFFICIENT_SPACE


def test_sell_seller_inventory_full(shop, listing):
    add_items(shop.inventory, COPPER, 10)
    seller = Container(1, slots=[ItemStack(IRON, 64)])
    # Seller's only slot frees up only after the items leave; the check runs before
    assert sell(shop, listing, seller, 3).reason is FailureReason.INVENTORY_FULL


def test_sell_returns_items_when_payment_fails(monkeypatch, shop, listing):
    from chestshops.core.transaction import engine

    add_items(shop.inventory, COPPER, 10)
    seller = Container(9)
    add_items(seller, IRON, 4)
    monkeypatch.setattr(engine, "remove_items", lambda *args: False)

    result = sell(shop, listing, seller, 4)

    assert result.reason is FailureReason.TRANSACTION_ERROR
    assert count(seller, IRON) == 4
    assert count(shop.inventory, IRON) == 10
    assert count(seller, COPPER) == 0


def test_sell_keeps_trade_when_seller_payout_is_lost(monkeypatch, caplog, shop, listing):
    from chestshops.core.transaction import engine

    add_items(shop.inventory, COPPER, 10)
    seller = Container(9)
    add_items(seller, IRON, 4)

    def add_items_except_seller(container, item_id, quantity):
        if container is seller:
            return False
        return add_items(container, item_id, quantity)

    monkeypatch.setattr(engine, "add_items", add_items_except_seller)

    with caplog.at_level(logging.ERROR, logger="chestshops.core.transaction.engine"):
        result = sell(shop, listing, seller, 4)

    assert result == Success(4, "Sold 4x iron_bar for 4x copper_bar")
    assert count(seller, IRON) == 0
    assert count(seller, COPPER) == 0
    assert count(shop.inventory, IRON) == 14
    assert count(shop.inventory, COPPER) == 6
    assert shop.total_earnings == 0
    assert shop.dirty
    assert [record.levelno for record in caplog.records] == [logging.ERROR]
    assert "Seller could not absorb 4x copper_bar" in caplog.text


def test_sell_doesnt_buy(shop, buyer):
    listing = Listing(item_id=IRON, currency_item_id=COPPER, buy_price=2)
    result = sell(shop, listing, buyer, 1)
    assert result == Failure(FailureReason.SHOP_DOESNT_BUY, "This shop doesn't buy items.")
