"""Tests for the customer trade surface."""

import pytest

from chestshops import BlockPos
from chestshops.components import Transform
from chestshops.core.container import add_items, count
from chestshops.core.transaction import FailureReason
from chestshops.surfaces import TradeEventData, TradePage
from chestshops.world import remove_shop

SHOP_POS = BlockPos(0, 64, 0)
IRON = "Ingredient_Bar_Iron"
COPPER = "Ingredient_Bar_Copper"


@pytest.fixture
def page(world, ui, customer):
    surface = TradePage(world, SHOP_POS, customer)
    ui.open_surface(surface)
    return surface


@pytest.mark.parametrize(
    "payload,expected",
    [
        ({"Action": "buy:5"}, ("buy", 5)),
        ({"Action": "sell:2", "ShiftHeld": True}, ("sell", 20)),
        ({"Action": "buy"}, ("buy", 1)),
        ({"Action": "buy:many"}, ("buy", 1)),
        ({"Action": "buy", "ShiftHeld": True}, ("buy", 10)),
    ],
)
def test_event_parsing(payload, expected):
    assert TradeEventData.model_validate(payload).parse(10) == expected


def test_view_of_configured_shop(iron_shop, page):
    view = page.view()

    assert view.title == "Ava's Shop"
    assert view.item_name == "Ingredient Bar Iron"
    assert view.stock_text == "Item: Ingredient Bar Iron | Stock: 10"
    assert view.buy_text == "2 Ingredient Bar Copper"
    assert view.sell_text == "1 Ingredient Bar Copper"
    assert view.can_buy and view.can_sell


def test_view_of_buy_only_shop(iron_shop, page):
    iron_shop.set_listing(iron_shop.get_listing(0).with_changes(sell_price=0))

    view = page.view()

    assert view.can_buy and not view.can_sell
    assert view.sell_text == "Not buying"


def test_view_of_unconfigured_shop(shop, page):
    view = page.view()

    assert view.item_name == "Not Configured"
    assert view.buy_text == "Not for sale"
    assert not view.can_buy


def test_view_after_shop_removed(world, iron_shop, page):
    remove_shop(world, SHOP_POS)
    assert page.view().title == "Shop Not Found"


def test_buy_through_page(world, ui, customer, give, iron_shop, page):
    give(customer, COPPER, 25)

    result = page.handle({"Action": "buy:5"})

    assert result.ok
    container = world.inventory_of(customer).container
    assert count(container, IRON) == 5
    assert count(container, COPPER) == 15
    assert iron_shop.total_earnings == 10
    assert page.message == "Bought 5x Ingredient_Bar_Iron for 10x Ingredient_Bar_Copper"
    assert ui.refresh_count[page.player_id] == 1
    assert page.view().stock_text.endswith("Stock: 5")


def test_shift_multiplies_quantity(world, customer, give, iron_shop, page):
    give(customer, COPPER, 20)

    result = page.handle(TradeEventData(action="buy:1", shift_held=True))

    assert result.quantity == 10
    assert count(iron_shop.inventory, IRON) == 0


def test_failed_buy_reports_reason(customer, give, iron_shop, page):
    give(customer, COPPER, 5)

    result = page.handle({"Action": "buy:5"})

    assert result.reason is FailureReason.INSUFFICIENT_FUNDS
    assert page.message == "Not enough Ingredient_Bar_Copper. Need 10, have 5"
    assert count(iron_shop.inventory, IRON) == 10


def test_sell_through_page(world, customer, give, iron_shop, page):
    give(customer, IRON, 3)
    add_items(iron_shop.inventory, COPPER, 5)

    result = page.handle({"Action": "sell:3"})

    assert result.ok
    assert count(world.inventory_of(customer).container, COPPER) == 3
    assert count(iron_shop.inventory, IRON) == 13
    assert iron_shop.total_earnings == 0


@pytest.mark.parametrize("payload", [{}, {"Action": ""}, {"Action": "steal:5"}])
def test_non_trade_actions_do_nothing(ui, iron_shop, page, payload):
    assert page.handle(payload) is None
    assert ui.refresh_count[page.player_id] == 0
    assert count(iron_shop.inventory, IRON) == 10


def test_trade_on_vanished_shop(world, iron_shop, page):
    remove_shop(world, SHOP_POS)
    assert page.handle({"Action": "buy:1"}) is None
    assert page.message == "Shop no longer exists!"


def test_trade_on_shop_without_listing(shop, page):
    assert page.handle({"Action": "buy:1"}) is None
    assert page.message == "Shop not configured!"


def test_page_requires_a_player(world, iron_shop):
    with pytest.raises(ValueError):
        TradePage(world, SHOP_POS, world.spawn(Transform(0.0, 0.0, 0.0)))
