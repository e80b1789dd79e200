"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from uuid import uuid4

from chestshops import BlockPos, ChestShopsPlugin, World
from chestshops.adapters import LocalUIGateway
from chestshops.config import ShopSettings
from chestshops.core.block import ContainerBlock
from chestshops.core.container import Container, add_items
from chestshops.core.items import ItemStack
from chestshops.world import create_shop

CHEST = "Furniture_Crude_Chest_Small"
SHOP_POS = BlockPos(0, 64, 0)
IRON = "Ingredient_Bar_Iron"
COPPER = "Ingredient_Bar_Copper"


@pytest.fixture
def settings():
    """Default settings, isolated from the process environment."""
    return ShopSettings(_env_file=None)


@pytest.fixture
def ui():
    return LocalUIGateway()


@pytest.fixture
def world(settings, ui):
    """World with the shop plugin installed."""
    w = World("overworld", settings=settings, ui=ui)
    ChestShopsPlugin(w).setup()
    yield w
    w.close()


@pytest.fixture
def owner(world):
    return world.spawn_player(uuid4(), "Ava", position=(0.5, 65.0, 2.5))


@pytest.fixture
def customer(world):
    return world.spawn_player(uuid4(), "Bo", position=(2.5, 64.0, 0.5))


@pytest.fixture
def admin(world, settings):
    return world.spawn_player(
        uuid4(), "Cy", permissions=[settings.admin_permission], position=(0.5, 64.0, -1.5)
    )


@pytest.fixture
def give(world):
    """Put plain items into a player's inventory: give(player, item_id, qty)."""

    def _give(player, item_id, quantity):
        assert add_items(world.inventory_of(player).container, item_id, quantity)

    return _give


@pytest.fixture
def hold(world):
    """Put a stack into the player's held slot: hold(player, item_id, qty)."""

    def _hold(player, item_id, quantity=1):
        inventory = world.inventory_of(player)
        inventory.container[inventory.held_slot] = ItemStack(item_id, quantity)

    return _hold


@pytest.fixture
def chest(world):
    """Place a plain chest at SHOP_POS and return its container."""
    container = world.new_container()
    world.set_block(SHOP_POS, ContainerBlock(CHEST, container))
    return container


@pytest.fixture
def shop(world, owner, chest):
    """Unconfigured shop owned by `owner` at SHOP_POS."""
    return create_shop(world, SHOP_POS, world.player_uuid(owner), "Ava")


@pytest.fixture
def iron_shop(shop):
    """Shop selling iron for 2 copper and buying it for 1, stocked with 10 iron."""
    add_items(shop.inventory, IRON, 10)
    shop.set_listing(
        shop.get_or_create_listing(0).with_changes(
            item_id=IRON, currency_item_id=COPPER, buy_price=2, sell_price=1
        )
    )
    shop.mark_saved()
    return shop


@pytest.fixture
def container():
    return Container(9)
